import pytest

from attendance_portal.config import load_settings
from attendance_portal.container import build_container
from attendance_portal.core.enums import ErrorCode, Role
from attendance_portal.database.bootstrap import ensure_demo_data

from conftest import admin_ctx, student_ctx, teacher_ctx


@pytest.fixture
def container(clock):
    c = build_container(settings=load_settings("attendance_portal.config.testing"), clock=clock)
    ensure_demo_data(c)
    return c


@pytest.fixture
def courses(container):
    return container.course_service


def _subjects_of(container, email):
    return container.users_repo.get_by_email(email).subjects


def test_create_course_extends_catalog(container, courses):
    res = courses.create_course(admin_ctx(), name="ML")

    assert res.ok
    assert res.message == "Course created"
    assert res.value.name == "ML"
    assert res.value.teacher_email is None
    assert "ML" in container.subject_catalog
    assert container.subject_catalog.all()[-1] == "ML"


def test_create_course_rejects_duplicates_and_blank_names(courses):
    dup = courses.create_course(admin_ctx(), name="iot")
    blank = courses.create_course(admin_ctx(), name="   ")

    assert dup.error == ErrorCode.ALREADY_EXISTS
    assert blank.error == ErrorCode.VALIDATION_FAILED


def test_admin_operations_require_admin(courses):
    for ctx in (None, teacher_ctx("IOT"), student_ctx()):
        assert courses.create_course(ctx, name="ML").error == ErrorCode.NOT_AUTHORIZED
        assert courses.panel_data(ctx).error == ErrorCode.NOT_AUTHORIZED
        assert courses.assign_teacher(ctx, course_id=1, teacher_email="bob.teacher@example.com").error == (
            ErrorCode.NOT_AUTHORIZED
        )


def test_assign_teacher_moves_subject_between_teachers(container, courses):
    iot = container.courses_repo.get_by_name("IOT")

    res = courses.assign_teacher(admin_ctx(), course_id=iot.course_id, teacher_email="Alice.Teacher@example.com")

    assert res.ok
    assert res.message == "Teacher assigned to course"
    assert res.value.teacher_email == "alice.teacher@example.com"
    assert _subjects_of(container, "alice.teacher@example.com") == ("CRP", "IOT")
    assert _subjects_of(container, "bob.teacher@example.com") == ()


def test_assigning_same_teacher_twice_is_stable(container, courses):
    iot = container.courses_repo.get_by_name("IOT")

    courses.assign_teacher(admin_ctx(), course_id=iot.course_id, teacher_email="bob.teacher@example.com")

    assert _subjects_of(container, "bob.teacher@example.com") == ("IOT",)


def test_assign_teacher_unknown_course_or_teacher(container, courses):
    iot = container.courses_repo.get_by_name("IOT")

    missing_course = courses.assign_teacher(admin_ctx(), course_id=99, teacher_email="bob.teacher@example.com")
    not_a_teacher = courses.assign_teacher(admin_ctx(), course_id=iot.course_id, teacher_email="swan.pyae@example.com")

    for res in (missing_course, not_a_teacher):
        assert res.error == ErrorCode.COURSE_OR_PERSON_NOT_FOUND
        assert res.message == "Course or teacher not found"


def test_enroll_student(container, courses):
    ml = courses.create_course(admin_ctx(), name="ML").value

    ok = courses.enroll_student(admin_ctx(), course_id=ml.course_id, roll_number="20260000002")
    again = courses.enroll_student(admin_ctx(), course_id=ml.course_id, roll_number="20260000002")
    missing = courses.enroll_student(admin_ctx(), course_id=ml.course_id, roll_number="20269999999")

    assert ok.message == "Student enrolled to course"
    assert again.value.student_roll_numbers == ("20260000002",)
    assert missing.error == ErrorCode.COURSE_OR_PERSON_NOT_FOUND
    assert missing.message == "Course or student not found"


def test_register_student_puts_them_on_the_roster(container, courses):
    res = courses.register_student(
        admin_ctx(),
        name="Hnin Wai",
        email="hnin.wai@example.com",
        roll_number="20260000005",
        phone="09555555555",
        password="student123",
        scan_credential_id="FP-0005",
    )

    assert res.ok
    assert res.message == "Student registered"
    assert container.roster_repo.resolve_credential("FP-0005").roll_number == "20260000005"
    assert container.users_repo.get_by_id(res.value).role == Role.STUDENT


def test_register_student_rejects_taken_credential(container, courses):
    res = courses.register_student(
        admin_ctx(),
        name="Hnin Wai",
        email="hnin.wai@example.com",
        roll_number="20260000005",
        phone="",
        password="student123",
        scan_credential_id="FP-0001",
    )

    assert res.error == ErrorCode.ALREADY_EXISTS
    assert container.roster_repo.get_by_roll_number("20260000005") is None


def test_register_teacher(container, courses):
    res = courses.register_teacher(
        admin_ctx(), name="Teacher Eve", email="eve.teacher@example.com", phone="", password="teacher123"
    )
    dup = courses.register_teacher(
        admin_ctx(), name="Teacher Eve", email="eve.teacher@example.com", phone="", password="teacher123"
    )

    assert res.message == "Teacher registered"
    assert _subjects_of(container, "eve.teacher@example.com") == ()
    assert dup.error == ErrorCode.ALREADY_EXISTS


def test_panel_data_lists_everything(courses):
    panel = courses.panel_data(admin_ctx()).value

    assert [c.name for c in panel.courses] == ["CRP", "IOT", "BPS", "WDD"]
    assert all(len(c.student_roll_numbers) == 4 for c in panel.courses)
    assert {"name": "Teacher Bob", "email": "bob.teacher@example.com"} in panel.teachers
    assert panel.students[1] == {
        "name": "Swan Pyae Aung",
        "roll_number": "20260000002",
        "email": "swan.pyae@example.com",
    }


def test_demo_seed_is_idempotent(container):
    ensure_demo_data(container)

    assert len(container.users_repo.list_by_role(Role.TEACHER)) == 4
    assert len(container.ledger) == 2
