from functools import lru_cache

from apps.api.store import SessionStore
from core.config import settings


def get_settings():
    """Provides application settings/config globally."""
    return settings


@lru_cache
def get_session_store() -> SessionStore:
    """Singleton in-memory session store."""
    return SessionStore()
