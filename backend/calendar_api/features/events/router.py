"""
Events feature: API routes for calendar event management.
"""

from fastapi import APIRouter, Depends, Query, Response, status

from calendar_api.core.dependencies import get_event_store
from calendar_api.core.exceptions import (
    EventNotFoundError,
    EventValidationError,
    app_error_to_http,
)
from calendar_api.features.events.schemas import (
    CalendarEvent,
    EventCreate,
    EventType,
    EventUpdate,
    parse_local_datetime,
)
from calendar_api.features.events.service import EventStore

router = APIRouter()


@router.get("", response_model=list[CalendarEvent])
async def list_events(store: EventStore = Depends(get_event_store)):
    """List all events."""
    return store.list_events()


# Query routes are declared before /{event_id} so their paths are not taken as ids.

@router.get("/search", response_model=list[CalendarEvent])
async def search_events(
    keyword: str = Query(...),
    store: EventStore = Depends(get_event_store),
):
    """Case-insensitive substring search over title and description."""
    return store.search_by_keyword(keyword)


@router.get("/date-range", response_model=list[CalendarEvent])
async def get_events_by_date_range(
    start_date: str = Query(..., alias="startDate"),
    end_date: str = Query(..., alias="endDate"),
    store: EventStore = Depends(get_event_store),
):
    """Events whose start date falls between startDate and endDate (inclusive)."""
    try:
        start = parse_local_datetime(start_date, "startDate")
        end = parse_local_datetime(end_date, "endDate")
    except EventValidationError as e:
        raise app_error_to_http(e, status.HTTP_400_BAD_REQUEST)
    return store.find_by_date_range(start, end)


@router.get("/type/{event_type}", response_model=list[CalendarEvent])
async def get_events_by_type(
    event_type: EventType,
    store: EventStore = Depends(get_event_store),
):
    """Events of a single type."""
    return store.find_by_event_type(event_type)


@router.get("/{event_id}", response_model=CalendarEvent)
async def get_event(event_id: int, store: EventStore = Depends(get_event_store)):
    """Get one event by id."""
    event = store.get_event(event_id)
    if event is None:
        raise app_error_to_http(EventNotFoundError(event_id), status.HTTP_404_NOT_FOUND)
    return event


@router.post("", response_model=CalendarEvent, status_code=status.HTTP_201_CREATED)
async def create_event(data: EventCreate, store: EventStore = Depends(get_event_store)):
    """Create a new calendar event."""
    try:
        return store.create_event(data)
    except EventValidationError as e:
        raise app_error_to_http(e, status.HTTP_400_BAD_REQUEST)


@router.put("/{event_id}", response_model=CalendarEvent)
async def update_event(
    event_id: int,
    data: EventUpdate,
    store: EventStore = Depends(get_event_store),
):
    """Replace an existing event's fields."""
    event = store.update_event(event_id, data)
    if event is None:
        raise app_error_to_http(EventNotFoundError(event_id), status.HTTP_404_NOT_FOUND)
    return event


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(event_id: int, store: EventStore = Depends(get_event_store)):
    """Delete an event."""
    if not store.delete_event(event_id):
        raise app_error_to_http(EventNotFoundError(event_id), status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
