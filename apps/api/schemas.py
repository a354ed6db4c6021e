from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field

from domain.models import CounterState, WorkflowState


class VariantOut(BaseModel):
    name: str
    title: str
    required_fields: list[str]
    delay_s: float
    auto_complete: bool


class SessionOut(BaseModel):
    id: str
    state: WorkflowState
    can_advance: bool
    missing_fields: list[str]
    accepted: bool = True


class FieldIn(BaseModel):
    value: str = ""


class ScoreIn(BaseModel):
    age: str = ""
    income: str = ""
    variant: str = "review"


class ScoreOut(BaseModel):
    age: int
    income: float
    score: float
    status: str
    approved: bool


class MultiplyIn(BaseModel):
    a: str = ""
    b: str = ""


class MultiplyOut(BaseModel):
    product: float


class IncrementIn(BaseModel):
    type: Literal["increment"]


class DecrementIn(BaseModel):
    type: Literal["decrement"]


class SetNameIn(BaseModel):
    type: Literal["set_name"]
    name: str


class ToggleFlagIn(BaseModel):
    type: Literal["toggle_flag"]


CounterActionIn = Union[IncrementIn, DecrementIn, SetNameIn, ToggleFlagIn]


class CounterIn(BaseModel):
    state: CounterState = Field(default_factory=CounterState)
    actions: list[CounterActionIn] = Field(default_factory=list)


class CounterOut(BaseModel):
    state: CounterState
    effects: int
    badge: str
