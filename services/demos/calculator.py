import math

from services.eligibility.features import parse_amount


def multiply(a: str, b: str) -> float:
    """Product of two typed numbers; unparseable operands or overflow count as 0."""
    product = parse_amount(a) * parse_amount(b)
    return product if math.isfinite(product) else 0.0
