from __future__ import annotations

from typing import Any, TypedDict

from domain.value_objects import ScoringPolicy


class State(TypedDict, total=False):
    fields: dict[str, str]  # raw form snapshot
    policy: ScoringPolicy
    features: dict[str, Any]  # parsed numbers (zero on bad input)
    score: float
    status: str
    approved: bool
    steps: list[str]  # diary of what ran
