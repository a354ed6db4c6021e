from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException

from apps.api.deps import get_session_store
from apps.api.schemas import FieldIn, SessionOut, VariantOut
from apps.api.store import SessionNotFound, SessionStore, finish_processing
from domain.errors import UnknownFieldError, UnknownVariantError
from domain.models import WorkflowState
from services.eligibility.rules import can_advance, missing_fields
from services.orchestration.controller import Action, EditField, Process, Restart, Send, Submit
from services.orchestration.policies import VARIANTS, get_variant

router = APIRouter(tags=["workflows"])


def _view(sid: str, state: WorkflowState, accepted: bool = True) -> SessionOut:
    required = get_variant(state.variant).required_fields
    return SessionOut(
        id=sid,
        state=state,
        can_advance=can_advance(state.fields, required),
        missing_fields=missing_fields(state.fields, required),
        accepted=accepted,
    )


def _dispatch(store: SessionStore, sid: str, action: Action) -> tuple[WorkflowState, bool]:
    try:
        return store.dispatch(sid, action)
    except SessionNotFound as e:
        raise HTTPException(404, "session not found") from e
    except UnknownFieldError as e:
        raise HTTPException(422, str(e)) from e


@router.get("/workflows", response_model=list[VariantOut])
def list_workflows():
    return [
        VariantOut(
            name=v.name,
            title=v.title,
            required_fields=list(v.required_fields),
            delay_s=v.delay_s,
            auto_complete=v.auto_complete,
        )
        for v in VARIANTS.values()
    ]


@router.post("/workflows/{variant}/sessions", response_model=SessionOut, status_code=201)
def create_session(variant: str, store: SessionStore = Depends(get_session_store)):  # noqa: B008
    try:
        sid, state = store.create(variant)
    except UnknownVariantError as e:
        raise HTTPException(404, str(e)) from e
    return _view(sid, state)


@router.get("/sessions/{sid}", response_model=SessionOut)
def get_session(sid: str, store: SessionStore = Depends(get_session_store)):  # noqa: B008
    try:
        state = store.get(sid)
    except SessionNotFound as e:
        raise HTTPException(404, "session not found") from e
    return _view(sid, state)


@router.put("/sessions/{sid}/fields/{field}", response_model=SessionOut)
def edit_field(
    sid: str,
    field: str,
    payload: FieldIn,
    store: SessionStore = Depends(get_session_store),  # noqa: B008
):
    state, accepted = _dispatch(store, sid, EditField(field, payload.value))
    return _view(sid, state, accepted)


@router.post("/sessions/{sid}/submit", response_model=SessionOut)
def submit(
    sid: str,
    background_tasks: BackgroundTasks,
    store: SessionStore = Depends(get_session_store),  # noqa: B008
):
    state, accepted = _dispatch(store, sid, Submit())
    if accepted and state.pending:
        background_tasks.add_task(finish_processing, store, sid)
    return _view(sid, state, accepted)


@router.post("/sessions/{sid}/process", response_model=SessionOut)
def process(sid: str, store: SessionStore = Depends(get_session_store)):  # noqa: B008
    state, accepted = _dispatch(store, sid, Process())
    return _view(sid, state, accepted)


@router.post("/sessions/{sid}/send", response_model=SessionOut)
def send(sid: str, store: SessionStore = Depends(get_session_store)):  # noqa: B008
    state, accepted = _dispatch(store, sid, Send())
    return _view(sid, state, accepted)


@router.post("/sessions/{sid}/restart", response_model=SessionOut)
def restart(sid: str, store: SessionStore = Depends(get_session_store)):  # noqa: B008
    state, accepted = _dispatch(store, sid, Restart())
    return _view(sid, state, accepted)


@router.delete("/sessions/{sid}", status_code=204)
def delete_session(sid: str, store: SessionStore = Depends(get_session_store)):  # noqa: B008
    try:
        store.remove(sid)
    except SessionNotFound as e:
        raise HTTPException(404, "session not found") from e
