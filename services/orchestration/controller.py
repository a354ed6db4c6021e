"""
Screen controller for the mortgage workflows.

All state changes go through ``update(state, action)``, which returns a new
``WorkflowState`` and never mutates its argument. Actions that are not legal
for the current screen are no-ops: the same state object comes back, so
callers can detect a refused action with ``new is old``.

    INPUT --Submit--> PROCESSING --Process/Send--> REVIEW      (manual variant)
    INPUT --Submit--> PROCESSING --Complete-->     REVIEW      (delayed variant)
    any   --Restart--> INPUT
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from domain.errors import UnknownFieldError
from domain.models import FormFields, ProcessingResult, Screen, WorkflowState
from services.eligibility.rules import can_advance
from services.orchestration.graphs import process_input, process_input_delayed
from services.orchestration.policies import get_variant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditField:
    name: str
    value: str


@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class Process:
    pass


@dataclass(frozen=True)
class Send:
    pass


@dataclass(frozen=True)
class Complete:
    run_id: int
    result: ProcessingResult


@dataclass(frozen=True)
class Restart:
    pass


Action = Union[EditField, Submit, Process, Send, Complete, Restart]


def initial_state(variant: str) -> WorkflowState:
    get_variant(variant)
    return WorkflowState(variant=variant)


def _goto(state: WorkflowState, screen: Screen, **changes) -> WorkflowState:
    if screen != state.screen:
        logger.info("Current screen: %s -> %s", state.screen.value, screen.value)
    return state.model_copy(update={"screen": screen, **changes})


def _edit(state: WorkflowState, action: EditField) -> WorkflowState:
    if action.name not in FormFields.field_names():
        raise UnknownFieldError(action.name)
    if state.screen != Screen.INPUT:
        return state
    fields = state.fields.model_copy(update={action.name: action.value})
    return state.model_copy(update={"fields": fields})


def _submit(state: WorkflowState, action: Submit) -> WorkflowState:
    variant = get_variant(state.variant)
    if state.screen != Screen.INPUT or not can_advance(state.fields, variant.required_fields):
        return state
    return _goto(
        state,
        Screen.PROCESSING,
        run_id=state.run_id + 1,
        pending=variant.auto_complete,
    )


def _process(state: WorkflowState, action: Process) -> WorkflowState:
    variant = get_variant(state.variant)
    if variant.auto_complete or state.screen != Screen.PROCESSING or state.result is not None:
        return state
    result = process_input(state.fields, variant.policy)
    return state.model_copy(update={"result": result})


def _send(state: WorkflowState, action: Send) -> WorkflowState:
    variant = get_variant(state.variant)
    if variant.auto_complete or state.screen != Screen.PROCESSING or state.result is None:
        return state
    logger.info("Sending to review...")
    return _goto(state, Screen.REVIEW)


def _complete(state: WorkflowState, action: Complete) -> WorkflowState:
    if not state.pending or state.screen != Screen.PROCESSING or action.run_id != state.run_id:
        logger.info("Discarding stale result for run %s", action.run_id)
        return state
    return _goto(state, Screen.REVIEW, result=action.result, pending=False)


def _restart(state: WorkflowState, action: Restart) -> WorkflowState:
    logger.info("Restarting workflow...")
    return _goto(
        state,
        Screen.INPUT,
        fields=FormFields(),
        result=None,
        pending=False,
    )


_HANDLERS = {
    EditField: _edit,
    Submit: _submit,
    Process: _process,
    Send: _send,
    Complete: _complete,
    Restart: _restart,
}


def update(state: WorkflowState, action: Action) -> WorkflowState:
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"unsupported action: {action!r}")
    return handler(state, action)


async def run_pending(state: WorkflowState) -> Complete:
    """
    Background half of the delayed variant: score a snapshot of the submitted
    form after the simulated delay and wrap the outcome as a ``Complete``.
    """
    variant = get_variant(state.variant)
    result = await process_input_delayed(state.fields, variant.policy, variant.delay_s)
    return Complete(run_id=state.run_id, result=result)
