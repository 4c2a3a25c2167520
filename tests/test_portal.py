from __future__ import annotations

import csv
import io
from datetime import date, datetime, timezone

from attendance_portal.core.enums import AttendanceStatus, ErrorCode, Role

BOB = ("bob.teacher@example.com", "teacher123")
SWAN = ("swan.pyae@example.com", "student123")
ADMIN = ("admin@example.com", "admin123")


def test_teacher_scans_and_student_sees_it(portal, login, clock):
    bob = login(*BOB)
    swan = login(*SWAN)

    scan = portal.scan(bob, "FP-0002")
    repeat = portal.scan(bob, "FP-0002")

    assert scan.ok
    assert scan.message == "Swan Pyae Aung marked present for IOT"
    assert repeat.error == ErrorCode.ALREADY_RECORDED
    assert repeat.message == "Swan Pyae Aung already marked for IOT today"

    history = portal.history(swan).value
    assert [(e.subject, e.status) for e in history] == [("IOT", AttendanceStatus.PRESENT)]

    absent = portal.absentees(swan, "2026-03-11").value
    assert [a.subject for a in absent] == ["CRP", "BPS", "WDD"]


def test_identity_failures_pass_through_unchanged(portal, login, clock):
    swan = login(*SWAN)

    anonymous = portal.scan(None, "FP-0002")
    as_student = portal.scan(swan, "FP-0002")

    assert anonymous.error == ErrorCode.NOT_AUTHENTICATED
    assert anonymous.message == "Not authenticated"
    assert as_student.error == ErrorCode.NOT_AUTHORIZED

    clock.advance(days=8)
    expired = portal.scan(swan, "FP-0002")
    assert expired.error == ErrorCode.SESSION_EXPIRED
    assert expired.message == "Session expired"


def test_teacher_login_flag(portal):
    assert portal.login(*SWAN, as_teacher=True).error == ErrorCode.NOT_AUTHORIZED
    assert portal.login(*BOB, as_teacher=True).value.role == Role.TEACHER
    assert portal.login("bob.teacher@example.com", "nope").message == "Invalid credentials"


def test_profile(portal, login):
    ctx = portal.profile(login(*BOB)).value

    assert ctx.role == Role.TEACHER
    assert ctx.subjects == ("IOT",)


def test_self_registration_and_login(portal):
    reg = portal.register(
        name="Hnin Wai",
        email="hnin.wai@example.com",
        roll_number="20260000005",
        phone="09555555555",
        password="secret1",
    )

    assert reg.ok
    assert portal.login("hnin.wai@example.com", "secret1").ok


def test_dates_are_parsed_and_validated(portal, login):
    bob = login(*BOB)

    assert len(portal.absentees(bob, date(2026, 3, 11)).value) == 4
    assert len(portal.absentees(bob, "2026-03-11").value) == 4
    assert portal.absentees(bob, "").value == []
    assert portal.absentees(bob, "2026-03-12").value == []

    bad = portal.absentees(bob, "11/03/2026")
    assert bad.error == ErrorCode.VALIDATION_FAILED
    assert bad.message == "Date must be YYYY-MM-DD"


def test_seeded_events_are_visible(portal, login):
    alice = login("alice.teacher@example.com", "teacher123")
    shinn = login("shinn.khant@example.com", "student123")

    records = portal.records(alice).value
    assert [(e.roll_number, e.work_date) for e in records] == [("20260000001", date(2025, 3, 11))]
    assert portal.history(shinn).value[0].subject == "CRP"

    crp_absent = portal.absentees(alice, "2025-03-11").value
    assert "20260000001" not in [a.person.roll_number for a in crp_absent]


def test_records_and_export_by_day(portal, login):
    bob = login(*BOB)
    portal.scan(bob, "FP-0001")
    portal.scan(bob, "FP-0004")

    assert len(portal.records(bob, "2026-03-11").value) == 2
    assert portal.records(bob, "2026-03-10").value == []

    export = portal.export(bob, "2026-03-11")
    rows = list(csv.DictReader(io.StringIO(export.value)))
    assert export.message == "Exported 2 records"
    assert [r["roll_number"] for r in rows] == ["20260000004", "20260000001"]


def test_roster_and_manual_marking(portal, login):
    bob = login(*BOB)

    assert len(portal.roster(bob).value) == 4
    assert portal.roster(login(*SWAN)).error == ErrorCode.NOT_AUTHORIZED
    assert portal.mark_attendance(bob).message == "Attendance can only be marked via fingerprint scan by teacher."


def test_admin_course_flow_reaches_scanning(portal, login):
    admin = login(*ADMIN)

    course = portal.create_course(admin, "ML").value
    portal.register_teacher(admin, name="Teacher Eve", email="eve.teacher@example.com", phone="", password="teacher123")
    portal.register_student(
        admin,
        name="Hnin Wai",
        email="hnin.wai@example.com",
        roll_number="20260000005",
        phone="",
        password="student123",
        scan_credential_id="FP-0005",
    )
    portal.assign_teacher(admin, course_id=course.course_id, teacher_email="eve.teacher@example.com")
    enrolled = portal.enroll_student(admin, course_id=course.course_id, roll_number="20260000005")

    assert enrolled.value.student_roll_numbers == ("20260000005",)

    eve = login("eve.teacher@example.com", "teacher123")
    res = portal.scan(eve, "FP-0005")
    assert res.message == "Hnin Wai marked present for ML"

    panel = portal.admin_panel(admin).value
    assert [c.name for c in panel.courses][-1] == "ML"
    assert len(panel.students) == 5

    # a new subject shows up in every student's absentee view
    swan_absent = portal.absentees(login(*SWAN), "2026-03-11").value
    assert "ML" in [a.subject for a in swan_absent]


def test_admin_panel_requires_admin(portal, login):
    assert portal.admin_panel(login(*BOB)).error == ErrorCode.NOT_AUTHORIZED


def test_datetime_is_accepted_as_a_day(portal, login):
    bob = login(*BOB)

    res = portal.absentees(bob, datetime(2026, 3, 11, 9, 0, tzinfo=timezone.utc))

    assert res.ok
    assert len(res.value) == 4
    assert portal.records(bob, datetime(2026, 3, 11)).ok
