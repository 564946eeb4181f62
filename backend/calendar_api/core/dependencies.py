"""
FastAPI dependency injection functions.
"""

from fastapi import Depends
from supabase import Client

from calendar_api.config import get_settings
from calendar_api.core.database import get_supabase_client
from calendar_api.features.config_options.service import ConfigService
from calendar_api.features.events.service import EventStore


def get_db() -> Client:
    """Dependency: get Supabase client."""
    return get_supabase_client()


def get_event_store(db: Client = Depends(get_db)) -> EventStore:
    """Dependency: event store bound to the configured table."""
    return EventStore(db, get_settings().EVENTS_TABLE)


def get_config_service() -> ConfigService:
    """Dependency: config service reading the configured options file."""
    return ConfigService(get_settings().CONFIG_OPTIONS_FILE)
