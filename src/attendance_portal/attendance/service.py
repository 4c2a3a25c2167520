from __future__ import annotations

import logging
from datetime import date, datetime, timezone, tzinfo
from typing import Callable, Optional

from ..common.datetime_utils import as_utc, local_date, now_utc
from ..common.locks import KeyedLocks
from ..core.constants import DEFAULT_SUBJECTS
from ..core.enums import ErrorCode
from ..core.exceptions import AlreadyRecordedError
from ..core.result import Result, guarded
from ..courses.catalog import SubjectCatalog
from ..identity.model import AuthorizationContext
from ..roster.model import Person
from ..roster.repository import RosterStore
from . import queries
from .classifier import StatusClassifier
from .export import render_csv
from .model import AbsenceRecord, AttendanceEvent, Eligibility
from .repository import AttendanceLedger

logger = logging.getLogger(__name__)

NOT_AUTHORIZED = "Not authorized"


def _denied() -> Result:
    return Result.failure(ErrorCode.NOT_AUTHORIZED, NOT_AUTHORIZED)


def _already_recorded(person: Person, subject: str) -> Result:
    return Result.failure(ErrorCode.ALREADY_RECORDED, f"{person.name} already marked for {subject} today")


class AttendanceService:
    """Attendance decision core: scan gate, write path and derived views."""

    def __init__(
        self,
        ledger: AttendanceLedger,
        roster: RosterStore,
        *,
        classifier: StatusClassifier | None = None,
        catalog: SubjectCatalog | None = None,
        tz: tzinfo = timezone.utc,
        clock: Callable[[], datetime] = now_utc,
        require_explicit_subject: bool = False,
    ):
        self._ledger = ledger
        self._roster = roster
        self._classifier = classifier or StatusClassifier()
        self._catalog = catalog or SubjectCatalog(DEFAULT_SUBJECTS)
        self._tz = tz
        self._clock = clock
        self._require_explicit_subject = bool(require_explicit_subject)
        self._locks = KeyedLocks()

    def today(self, now: datetime | None = None) -> date:
        return local_date(now or self._clock(), self._tz)

    # -----------------------------
    # Eligibility gate
    # -----------------------------
    def _active_subject(self, context: AuthorizationContext, subject: Optional[str]) -> Result[str]:
        if not context.subjects:
            return Result.failure(ErrorCode.NO_SUBJECT_ASSIGNED, "No subject assigned to teacher")

        if subject:
            if subject not in context.subjects:
                return _denied()
            return Result.success(subject)

        if len(context.subjects) > 1:
            if self._require_explicit_subject:
                return Result.failure(
                    ErrorCode.SUBJECT_AMBIGUOUS,
                    f"Choose a subject to record: {', '.join(context.subjects)}",
                )
            logger.warning(
                "Teacher %s has several subjects, recording against %s",
                context.email,
                context.subjects[0],
                extra={"actor": context.email, "subject": context.subjects[0]},
            )
        return Result.success(context.subjects[0])

    def _gate(
        self,
        context: Optional[AuthorizationContext],
        scan_credential_id: str,
        work_date: date,
        subject: Optional[str],
    ) -> Result[Eligibility]:
        if context is None or not context.is_teacher:
            return _denied()

        chosen = self._active_subject(context, subject)
        if not chosen.ok:
            return chosen

        person = self._roster.resolve_credential(scan_credential_id)
        if not person:
            return Result.failure(ErrorCode.UNKNOWN_CREDENTIAL, "Fingerprint not recognized")

        if self._ledger.exists(roll_number=person.roll_number, subject=chosen.value, work_date=work_date):
            return _already_recorded(person, chosen.value)

        return Result.success(Eligibility(person=person, subject=chosen.value, work_date=work_date))

    @guarded("Failed to check attendance eligibility", logger=logger)
    def can_record(
        self,
        context: Optional[AuthorizationContext],
        scan_credential_id: str,
        target_date: date,
        *,
        subject: Optional[str] = None,
    ) -> Result[Eligibility]:
        return self._gate(context, scan_credential_id, target_date, subject)

    # -----------------------------
    # Write path
    # -----------------------------
    @guarded("Failed to mark attendance", logger=logger)
    def record_scan(
        self,
        context: Optional[AuthorizationContext],
        scan_credential_id: str,
        *,
        now: datetime | None = None,
        subject: Optional[str] = None,
    ) -> Result[AttendanceEvent]:
        scanned_at = as_utc(now or self._clock())
        work_date = self.today(scanned_at)

        pre = self._gate(context, scan_credential_id, work_date, subject)
        if not pre.ok:
            self._log_denied(context, pre)
            return pre

        person, chosen = pre.value.person, pre.value.subject
        with self._locks.acquire((person.roll_number, chosen, work_date)):
            # re-check under the key lock, another scan may have won the race
            decision = self._gate(context, scan_credential_id, work_date, chosen)
            if not decision.ok:
                self._log_denied(context, decision)
                return decision

            status = self._classifier.classify_scan(scanned_at, self._tz)
            try:
                event_id = self._ledger.append(
                    roll_number=person.roll_number,
                    student_name=person.name,
                    subject=chosen,
                    recorder=context.email,
                    timestamp=scanned_at,
                    work_date=work_date,
                    status=status,
                )
            except AlreadyRecordedError:
                return _already_recorded(person, chosen)

        event = AttendanceEvent(
            event_id=event_id,
            roll_number=person.roll_number,
            student_name=person.name,
            subject=chosen,
            recorder=context.email,
            timestamp=scanned_at,
            work_date=work_date,
            status=status,
        )
        logger.info(
            "Recorded %s as %s for %s",
            person.roll_number,
            status.value,
            chosen,
            extra={"actor": context.email, "subject": chosen, "roll_number": person.roll_number},
        )
        return Result.success(event, message=f"{person.name} marked {status.label} for {chosen}")

    def mark_attendance(self) -> Result[None]:
        """Manual marking is not offered: attendance only comes from scans."""
        return Result.failure(
            ErrorCode.NOT_AUTHORIZED,
            "Attendance can only be marked via fingerprint scan by teacher.",
        )

    def _log_denied(self, context: Optional[AuthorizationContext], result: Result) -> None:
        actor = context.email if context else "anonymous"
        logger.info(
            "Scan denied for %s: %s",
            actor,
            result.error.value,
            extra={"actor": actor, "error_code": result.error.value},
        )

    # -----------------------------
    # Derived views
    # -----------------------------
    @guarded("Failed to load fingerprint roster", logger=logger)
    def roster_for(self, context: Optional[AuthorizationContext]) -> Result[list[Person]]:
        if context is None or not context.is_teacher:
            return _denied()
        return Result.success(list(self._roster.list_all()))

    @guarded("Failed to load absentees", logger=logger)
    def absentees_for(
        self,
        context: Optional[AuthorizationContext],
        day: Optional[date],
        *,
        now: datetime | None = None,
    ) -> Result[list[AbsenceRecord]]:
        if context is None:
            return _denied()

        if context.is_teacher:
            people = list(self._roster.list_all())
            subjects = tuple(context.subjects)
        elif context.is_student:
            person = self._roster.get_by_roll_number(context.roll_number)
            people = [person or Person(name=context.name, roll_number=context.roll_number)]
            subjects = self._catalog.all()
        else:
            return _denied()

        if day is None or day > self.today(now):
            return Result.success([])

        recorded = {
            (e.roll_number, e.subject)
            for e in self._ledger.query(lambda e: e.work_date == day and e.subject in subjects)
        }
        absentees = [
            AbsenceRecord(person=p, subject=s, work_date=day)
            for p in people
            for s in subjects
            if (p.roll_number, s) not in recorded
        ]
        return Result.success(absentees)

    @guarded("Failed to get attendance history", logger=logger)
    def history_for(
        self,
        context: Optional[AuthorizationContext],
        roll_number: Optional[str] = None,
    ) -> Result[list[AttendanceEvent]]:
        if context is None:
            return Result.failure(ErrorCode.NOT_AUTHENTICATED, "Not authenticated")

        if context.is_student:
            if roll_number and roll_number != context.roll_number:
                return _denied()
            return Result.success(queries.history_for(self._ledger, context.roll_number))

        if not roll_number:
            # staff accounts have no attendance of their own
            return Result.success([])

        events = queries.history_for(self._ledger, roll_number)
        if context.is_teacher:
            events = [e for e in events if e.subject in context.subjects]
        return Result.success(events)

    @guarded("Failed to get attendance records", logger=logger)
    def ledger_for(
        self,
        context: Optional[AuthorizationContext],
        date_filter: Optional[date] = None,
    ) -> Result[list[AttendanceEvent]]:
        if context is None or not context.is_teacher:
            return _denied()
        return Result.success(queries.ledger_for(self._ledger, context.email, date_filter))

    @guarded("Failed to export attendance data", logger=logger)
    def export_ledger(
        self,
        context: Optional[AuthorizationContext],
        date_filter: Optional[date] = None,
    ) -> Result[str]:
        if context is None or not context.is_teacher:
            return _denied()
        events = queries.ledger_for(self._ledger, context.email, date_filter)
        return Result.success(render_csv(events, self._tz), message=f"Exported {len(events)} records")
