"""
Events feature: sample data inserted at startup when SEED_SAMPLE_DATA is on.
"""

import logging
from datetime import datetime

from calendar_api.features.events.schemas import EventCreate, EventType
from calendar_api.features.events.service import EventStore

logger = logging.getLogger(__name__)

SAMPLE_EVENTS = [
    EventCreate(
        title="Ramadan",
        description="Holy month of fasting for Muslims",
        start_date=datetime(2024, 3, 11, 0, 0),
        end_date=datetime(2024, 4, 9, 23, 59),
        location="Morocco",
        event_type=EventType.RELIGIOUS,
    ),
    EventCreate(
        title="Independence Day",
        description="Morocco Independence Day celebration",
        start_date=datetime(2024, 11, 18, 9, 0),
        end_date=datetime(2024, 11, 18, 18, 0),
        location="Rabat, Morocco",
        event_type=EventType.CULTURAL,
    ),
    EventCreate(
        title="New Year",
        description="Celebration of the new year",
        start_date=datetime(2024, 1, 1, 0, 0),
        end_date=datetime(2024, 1, 1, 23, 59),
        location="Morocco",
        event_type=EventType.HOLIDAY,
    ),
    EventCreate(
        title="Team Meeting",
        description="Weekly team synchronization meeting",
        start_date=datetime(2024, 1, 15, 10, 0),
        end_date=datetime(2024, 1, 15, 11, 0),
        location="Office, Casablanca",
        event_type=EventType.WORK,
    ),
]


def seed_sample_events(store: EventStore) -> int:
    """Insert SAMPLE_EVENTS if the store is empty. Returns how many were inserted."""
    if store.count() > 0:
        logger.info("Event table not empty, skipping sample data")
        return 0

    for event in SAMPLE_EVENTS:
        store.create_event(event)
    logger.info(f"Sample data initialized: {len(SAMPLE_EVENTS)} events")
    return len(SAMPLE_EVENTS)
