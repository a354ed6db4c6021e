from __future__ import annotations

from domain.models import FormFields
from services.eligibility.features import extract_features
from services.eligibility.rules import classify, compute_score


def _push(state: dict, msg: str) -> None:
    state.setdefault("steps", []).append(msg)


def parse(state: dict) -> dict:
    fields = FormFields(**state.get("fields", {}))
    feats = extract_features(fields)
    _push(state, f"parse: age={feats['age']} income={feats['income']}")
    return {"features": feats, "steps": state["steps"]}


def score(state: dict) -> dict:
    feats = state["features"]
    value = compute_score(feats["age"], feats["income"], state["policy"])
    _push(state, f"score: {value}")
    return {"score": value, "steps": state["steps"]}


def decide(state: dict) -> dict:
    policy = state["policy"]
    value = state["score"]
    status = classify(value, policy)
    approved = value > policy.approval_threshold
    _push(state, f"decide: status={status} approved={approved}")
    return {"status": status, "approved": approved, "steps": state["steps"]}
