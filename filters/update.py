from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

# blend(current, target) -> current moved a weighted step toward target
Blend = Callable[[T, T], T]

@dataclass(slots=True)
class FilterState(Generic[T]):
    """Scalar state of one tracked series."""
    sample_count: int
    average: T
    local_min: T
    local_max: T

def step(state: FilterState[T], new_value: T, blend: Blend[T]) -> T:
    """
    Advance `state` by one sample and return the new average.

    The first sample seeds average, min and max. Afterwards the average
    blends toward the sample, and each extremum either snaps to a sample
    that exceeds it or fades toward a sample that lies beyond the *updated*
    average on its side.
    """
    if state.sample_count == 0:
        state.average = new_value
        state.local_min = new_value
        state.local_max = new_value
    else:
        state.average = blend(state.average, new_value)

        if new_value > state.local_max:
            state.local_max = new_value
        elif new_value > state.average:
            state.local_max = blend(state.local_max, new_value)

        if new_value < state.local_min:
            state.local_min = new_value
        elif new_value < state.average:
            state.local_min = blend(state.local_min, new_value)
    state.sample_count += 1

    return state.average

def trunc_div(n, d):
    """Integer division rounding toward zero (Python's // rounds toward -inf)."""
    q, r = divmod(n, d)
    if r != 0 and (n < 0) != (d < 0):
        q += 1
    return q
