from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from domain.models import CounterState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Increment:
    pass


@dataclass(frozen=True)
class Decrement:
    pass


@dataclass(frozen=True)
class SetName:
    name: str


@dataclass(frozen=True)
class ToggleFlag:
    pass


CounterAction = Union[Increment, Decrement, SetName, ToggleFlag]


def update_counter(state: CounterState, action: CounterAction) -> CounterState:
    if isinstance(action, Increment):
        return state.model_copy(update={"count": state.count + 1})
    if isinstance(action, Decrement):
        return state.model_copy(update={"count": state.count - 1})
    if isinstance(action, SetName):
        return state.model_copy(update={"name": action.name})
    if isinstance(action, ToggleFlag):
        return state.model_copy(update={"flag": not state.flag})
    raise TypeError(f"unsupported action: {action!r}")


def run_effect(previous: CounterState | None, current: CounterState) -> bool:
    """Log the state whenever it differs from the last render; True if it ran."""
    if previous is not None and previous == current:
        return False
    logger.info(
        "Effect ran: count=%s, name=%s, flag=%s", current.count, current.name, current.flag
    )
    return True


def badge(n: int) -> str:
    return f"hi {n + 1}"
