"""
Events feature: Service layer for calendar event storage and queries.
"""

import logging
from datetime import datetime

from supabase import Client

from calendar_api.core.exceptions import EventValidationError
from calendar_api.features.events.schemas import (
    CalendarEvent,
    EventCreate,
    EventType,
    EventUpdate,
)

logger = logging.getLogger(__name__)


def _escape_like(keyword: str) -> str:
    """Escape LIKE wildcards. PostgREST's `*` alias for `%` cannot be escaped."""
    return keyword.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _contains_keyword(event: CalendarEvent, needle: str) -> bool:
    return needle in event.title.lower() or needle in (event.description or "").lower()


class EventStore:
    """CRUD operations for calendar events plus keyword, date and type queries."""

    def __init__(self, db: Client, table: str = "calendar_events"):
        self.db = db
        self.table = table

    def _query(self):
        return self.db.table(self.table)

    @staticmethod
    def _to_events(rows: list[dict]) -> list[CalendarEvent]:
        return [CalendarEvent.model_validate(row) for row in rows]

    def list_events(self) -> list[CalendarEvent]:
        """All events in storage (id) order."""
        result = self._query().select("*").order("id").execute()
        return self._to_events(result.data)

    def get_event(self, event_id: int) -> CalendarEvent | None:
        """Get a single event by id, or None if it does not exist."""
        result = self._query().select("*").eq("id", event_id).execute()
        return CalendarEvent.model_validate(result.data[0]) if result.data else None

    def create_event(self, data: EventCreate) -> CalendarEvent:
        """Insert a new event; the table assigns its id.

        Raises:
            EventValidationError: If the store rejects the row. The store's
                message is logged but not passed on.
        """
        try:
            result = self._query().insert(data.to_row()).execute()
        except Exception as e:
            logger.error(f"Failed to insert event '{data.title}': {e}")
            raise EventValidationError(message="Could not create event")

        if not result.data:
            raise EventValidationError(message="Could not create event")

        event = CalendarEvent.model_validate(result.data[0])
        logger.info(f"Created event id={event.id} ({event.event_type.value})")
        return event

    def update_event(self, event_id: int, data: EventUpdate) -> CalendarEvent | None:
        """Replace every mutable field of an event. Returns None if it does not exist."""
        result = self._query().update(data.to_row()).eq("id", event_id).execute()
        return CalendarEvent.model_validate(result.data[0]) if result.data else None

    def delete_event(self, event_id: int) -> bool:
        """Hard delete an event. Returns False if it did not exist."""
        result = self._query().delete().eq("id", event_id).execute()
        deleted = bool(result.data)
        if deleted:
            logger.info(f"Deleted event id={event_id}")
        return deleted

    def search_by_keyword(self, keyword: str) -> list[CalendarEvent]:
        """Events whose title or description contains keyword, ignoring case.

        An empty keyword matches every event. Events with no description can
        still match on title.
        """
        if not keyword:
            return self.list_events()

        # ILIKE narrows the rows; the substring check below is authoritative
        # since `*` in the pattern still acts as a wildcard server-side.
        pattern = f"%{_escape_like(keyword)}%"
        by_id: dict[int, dict] = {}
        for column in ("title", "description"):
            result = self._query().select("*").ilike(column, pattern).execute()
            for row in result.data:
                by_id.setdefault(row["id"], row)

        needle = keyword.lower()
        events = self._to_events([by_id[k] for k in sorted(by_id)])
        return [event for event in events if _contains_keyword(event, needle)]

    def find_by_date_range(self, start: datetime, end: datetime) -> list[CalendarEvent]:
        """Events whose start date lies in [start, end], inclusive.

        Only the start date is compared: an event that began before `start`
        is excluded even if it is still running inside the range.
        """
        result = (
            self._query()
            .select("*")
            .gte("start_date", start.isoformat())
            .lte("start_date", end.isoformat())
            .order("id")
            .execute()
        )
        return self._to_events(result.data)

    def find_by_event_type(self, event_type: EventType) -> list[CalendarEvent]:
        """Events with exactly the given type."""
        result = (
            self._query()
            .select("*")
            .eq("event_type", event_type.value)
            .order("id")
            .execute()
        )
        return self._to_events(result.data)

    def count(self) -> int:
        """Number of stored events, counted server-side."""
        result = self._query().select("id", count="exact").limit(1).execute()
        return result.count or 0
