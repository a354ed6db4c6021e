"""
Workflow variants offered by the demos.
Each one fixes its required fields, its scoring policy and how processing finishes.
"""

from core.config import settings
from domain.errors import UnknownVariantError
from domain.value_objects import WorkflowVariant
from services.eligibility.rules import INCOME_ONLY, TWO_FACTOR

MORTGAGE_CALCULATOR = WorkflowVariant(
    name="calculator",
    title="Mortgage application",
    required_fields=("name", "age", "income"),
    policy=INCOME_ONLY,
    delay_s=settings.PROCESSING_DELAY_S,
    auto_complete=True,
)

REVIEW_CHAIN = WorkflowVariant(
    name="review",
    title="Client / Bank / Regulator review",
    required_fields=("name", "age", "income", "mortgage"),
    policy=TWO_FACTOR,
)

VARIANTS: dict[str, WorkflowVariant] = {
    v.name: v for v in (MORTGAGE_CALCULATOR, REVIEW_CHAIN)
}


def get_variant(name: str) -> WorkflowVariant:
    try:
        return VARIANTS[name]
    except KeyError as e:
        raise UnknownVariantError(name) from e
