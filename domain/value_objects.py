from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringPolicy:
    income_divisor: float = 1000.0
    age_weight: float = 1.5
    # (threshold, status) pairs, highest first; a score must be strictly above
    tiers: tuple[tuple[float, str], ...] = ((100.0, "high"), (50.0, "moderate"))
    fallback_status: str = "under review"
    approval_threshold: float = 100.0


@dataclass(frozen=True)
class WorkflowVariant:
    name: str
    title: str
    required_fields: tuple[str, ...]
    policy: ScoringPolicy
    delay_s: float = 0.0
    # delayed variants finish on their own; manual ones wait for process + send
    auto_complete: bool = False
