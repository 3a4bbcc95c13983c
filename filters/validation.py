from __future__ import annotations
from numbers import Real

def check_alpha(alpha: Real) -> None:
    """Reject weights that would not fade: alpha must lie strictly inside (0, 1)."""
    if not 0 < alpha < 1:
        raise ValueError(f"alpha must be in (0, 1), got {alpha}")

def check_ratio(numerator: int, denominator: int) -> None:
    if denominator == 0:
        raise ValueError("alpha_denominator must be non-zero")
    if not 0 < numerator / denominator < 1:
        raise ValueError(
            f"alpha_numerator/alpha_denominator must be in (0, 1), got {numerator}/{denominator}"
        )
