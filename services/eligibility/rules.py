from __future__ import annotations

import logging

from core.config import settings
from domain.models import FormFields
from domain.value_objects import ScoringPolicy

logger = logging.getLogger(__name__)

TWO_FACTOR = ScoringPolicy(
    tiers=(
        (settings.SCORE_HIGH_THRESHOLD, "high"),
        (settings.SCORE_MODERATE_THRESHOLD, "moderate"),
    ),
    approval_threshold=settings.SCORE_HIGH_THRESHOLD,
)
INCOME_ONLY = ScoringPolicy(
    age_weight=0.0,
    tiers=TWO_FACTOR.tiers,
    approval_threshold=settings.SCORE_MODERATE_THRESHOLD,
)


def missing_fields(fields: FormFields, required: tuple[str, ...]) -> list[str]:
    """Required fields that are still empty, in declaration order."""
    values = fields.model_dump()
    return [name for name in required if not values.get(name)]


def can_advance(fields: FormFields, required: tuple[str, ...]) -> bool:
    # no numeric check here; bad numbers become zero at scoring time
    return not missing_fields(fields, required)


def compute_score(age: int, income: float, policy: ScoringPolicy = TWO_FACTOR) -> float:
    return income / policy.income_divisor + age * policy.age_weight


def classify(score: float, policy: ScoringPolicy = TWO_FACTOR) -> str:
    for threshold, status in policy.tiers:
        if score > threshold:
            return status
    return policy.fallback_status


def evaluate(age: int, income: float, policy: ScoringPolicy = TWO_FACTOR) -> dict:
    """Return score + status + approval flag (deterministic)."""
    score = compute_score(age, income, policy)
    status = classify(score, policy)
    approved = score > policy.approval_threshold
    logger.info("Scoring complete: score=%s status=%s", score, status)
    return {"score": score, "status": status, "approved": approved}
