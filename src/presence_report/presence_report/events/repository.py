from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceEvent, Attendant


class AttendanceEventRepository(Protocol):
    """Read side of the event source.

    Listing methods return every matching event ordered by timestamp
    ascending; implementations paginate past any per-request row cap.
    """

    def list_by_date_range(self, start: date, end: date) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def list_by_user(
        self,
        user_id: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def list_by_name(
        self,
        name: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def list_attendants(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[Attendant]:
        raise NotImplementedError

    def list_latest_per_user(self) -> Sequence[AttendanceEvent]:
        raise NotImplementedError
