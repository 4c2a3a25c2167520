from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from .model import AttendanceEvent
from .repository import AttendanceLedger


def newest_first(events: Sequence[AttendanceEvent]) -> list[AttendanceEvent]:
    # event_id breaks timestamp ties so equal instants still order deterministically
    return sorted(events, key=lambda e: (e.timestamp, e.event_id), reverse=True)


def history_for(ledger: AttendanceLedger, roll_number: str) -> list[AttendanceEvent]:
    return newest_first(ledger.query(lambda e: e.roll_number == roll_number))


def ledger_for(ledger: AttendanceLedger, recorder: str, date_filter: Optional[date] = None) -> list[AttendanceEvent]:
    def _match(e: AttendanceEvent) -> bool:
        if e.recorder != recorder:
            return False
        return date_filter is None or e.work_date == date_filter

    return newest_first(ledger.query(_match))
