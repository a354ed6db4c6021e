from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Screen(str, Enum):
    INPUT = "input"
    PROCESSING = "processing"
    REVIEW = "review"

    @property
    def step(self) -> int:
        return _SCREEN_ORDER.index(self) + 1


_SCREEN_ORDER = [Screen.INPUT, Screen.PROCESSING, Screen.REVIEW]


class FormFields(BaseModel):
    """Raw text exactly as typed; parsing waits until submission."""

    name: str = ""
    age: str = ""
    income: str = ""
    mortgage: str = ""

    @classmethod
    def field_names(cls) -> list[str]:
        return list(cls.model_fields)


class ProcessingResult(BaseModel):
    fields: FormFields
    age: int
    income: float
    score: float
    status: str
    approved: bool


class WorkflowState(BaseModel):
    variant: str
    screen: Screen = Screen.INPUT
    fields: FormFields = Field(default_factory=FormFields)
    result: Optional[ProcessingResult] = None
    run_id: int = 0
    pending: bool = False


class CounterState(BaseModel):
    count: int = 0
    name: str = "Alice"
    flag: bool = False


class Tab(str, Enum):
    HOME = "home"
    SETTINGS = "settings"
    STATS = "stats"
