"""Tests for the in-memory session store."""

import asyncio
import logging
import threading

import pytest

from apps.api.store import SessionNotFound, SessionStore, finish_processing
from domain.models import FormFields, Screen
from services.orchestration.controller import EditField, Restart, Submit


def test_concurrent_edits_are_not_lost():
    store = SessionStore()
    sid, _ = store.create("review")
    values = {"name": "Ada", "age": "30", "income": "150000", "mortgage": "250000"}
    barrier = threading.Barrier(len(values))

    def edit(field, value):
        barrier.wait()
        for _ in range(200):
            store.dispatch(sid, EditField(field, value))

    threads = [threading.Thread(target=edit, args=item) for item in values.items()]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.get(sid).fields == FormFields(**values)


def test_remove_frees_the_session():
    store = SessionStore()
    sid, _ = store.create("review")
    assert len(store) == 1
    store.remove(sid)
    assert len(store) == 0
    with pytest.raises(SessionNotFound):
        store.get(sid)
    with pytest.raises(SessionNotFound):
        store.remove(sid)


def test_restart_before_completion_wins():
    store = SessionStore()
    sid, _ = store.create("calculator")
    for field, value in {"name": "Ada", "age": "30", "income": "1000"}.items():
        store.dispatch(sid, EditField(field, value))
    store.dispatch(sid, Submit())
    store.dispatch(sid, Restart())

    asyncio.run(finish_processing(store, sid))

    state = store.get(sid)
    assert state.screen == Screen.INPUT
    assert state.result is None


def test_background_task_tolerates_removed_session(caplog):
    store = SessionStore()
    sid, _ = store.create("calculator")
    store.remove(sid)
    with caplog.at_level(logging.INFO):
        asyncio.run(finish_processing(store, sid))
    assert "removed before processing finished" in caplog.text
