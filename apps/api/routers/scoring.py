from fastapi import APIRouter, HTTPException

from apps.api.schemas import ScoreIn, ScoreOut
from domain.errors import UnknownVariantError
from services.eligibility.features import parse_age, parse_amount
from services.eligibility.rules import evaluate
from services.orchestration.policies import get_variant

router = APIRouter(prefix="/score", tags=["scoring"])


@router.post("", response_model=ScoreOut)
def score(payload: ScoreIn):
    """
    Score raw age/income text under a variant's policy.
    Bad numbers are scored as zero, never rejected.
    """
    try:
        variant = get_variant(payload.variant)
    except UnknownVariantError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    age = parse_age(payload.age)
    income = parse_amount(payload.income)
    return ScoreOut(age=age, income=income, **evaluate(age, income, variant.policy))
