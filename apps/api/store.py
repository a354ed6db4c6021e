from __future__ import annotations

import logging
import threading
import uuid

from domain.models import WorkflowState
from services.orchestration.controller import Action, initial_state, run_pending, update

logger = logging.getLogger(__name__)


class SessionNotFound(KeyError):
    pass


class SessionStore:
    """
    In-memory workflow sessions, one WorkflowState per id.
    Sync routes run in the threadpool while background tasks dispatch from the
    event loop, so every read-modify-write holds the lock.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, WorkflowState] = {}
        self._lock = threading.Lock()

    def create(self, variant: str) -> tuple[str, WorkflowState]:
        state = initial_state(variant)
        sid = str(uuid.uuid4())
        with self._lock:
            self._sessions[sid] = state
        logger.info("created session %s (%s)", sid, variant)
        return sid, state

    def get(self, sid: str) -> WorkflowState:
        with self._lock:
            try:
                return self._sessions[sid]
            except KeyError as e:
                raise SessionNotFound(sid) from e

    def remove(self, sid: str) -> None:
        with self._lock:
            if self._sessions.pop(sid, None) is None:
                raise SessionNotFound(sid)
        logger.info("removed session %s", sid)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def dispatch(self, sid: str, action: Action) -> tuple[WorkflowState, bool]:
        """Apply one action; the flag says whether the state changed."""
        with self._lock:
            try:
                old = self._sessions[sid]
            except KeyError as e:
                raise SessionNotFound(sid) from e
            new = update(old, action)
            self._sessions[sid] = new
        return new, new is not old


async def finish_processing(store: SessionStore, sid: str) -> None:
    """Background task for delayed variants: wait, score, then post Complete."""
    try:
        snapshot = store.get(sid)
        complete = await run_pending(snapshot)
        store.dispatch(sid, complete)
    except SessionNotFound:
        logger.info("session %s removed before processing finished", sid)
    except Exception:
        # bandit B110: never swallow silently; the session stays pending
        logger.exception("background processing failed for session %s", sid)
