from __future__ import annotations
from typing import Callable, Generic, TypeVar

import numpy as np

from config import DEFAULT_DENOMINATOR, DEFAULT_NUMERATOR, FilterConfig
from interfaces import LocalRange
from .update import FilterState, step, trunc_div
from .validation import check_ratio

I = TypeVar("I")

class IntSeriesEwmaFilter(Generic[I]):
    """
    Integer-only counterpart of FloatSeriesEwmaFilter.

    The weight is the ratio alpha_numerator/alpha_denominator, applied as
    `(numerator * diff) / denominator`: multiply first, then divide rounding
    toward zero. Truncation makes every step slightly shorter than the exact
    rational one, so fades run a little slower than the float filter.

    `dtype` is `int` (unbounded) by default. With a numpy integer type such as
    `np.uint32` or `np.int16` the arithmetic keeps that width, and an
    overflow or a zero denominator raises FloatingPointError instead of wrapping.
    """
    __slots__ = ("_dtype", "_numerator", "_denominator", "_state")

    def __init__(
        self,
        alpha_numerator: int,
        alpha_denominator: int,
        dtype: Callable[..., I] = int,
        *,
        validate: bool = False,
    ):
        if validate:
            check_ratio(alpha_numerator, alpha_denominator)
        zero = dtype(0)
        self._dtype = dtype
        self._numerator: I = dtype(alpha_numerator)
        self._denominator: I = dtype(alpha_denominator)
        self._state: FilterState[I] = FilterState(0, zero, zero, zero)

    @classmethod
    def default(cls, dtype: Callable[..., I] = int) -> "IntSeriesEwmaFilter[I]":
        return cls(DEFAULT_NUMERATOR, DEFAULT_DENOMINATOR, dtype)

    @classmethod
    def from_config(cls, cfg: FilterConfig, dtype: Callable[..., I] = int) -> "IntSeriesEwmaFilter[I]":
        return cls(cfg.alpha_numerator, cfg.alpha_denominator, dtype, validate=cfg.validate)

    @property
    def alpha_numerator(self) -> I:
        return self._numerator

    @property
    def alpha_denominator(self) -> I:
        return self._denominator

    @property
    def sample_count(self) -> int:
        return self._state.sample_count

    def _blend(self, current: I, target: I) -> I:
        # multiply before divide; reordering changes rounding of small diffs
        return current + trunc_div(self._numerator * (target - current), self._denominator)

    def push_sample(self, new_value: I) -> I:
        """Push the next sample in the series. Returns the updated average."""
        new_value = self._dtype(new_value)
        if self._dtype is int:
            return step(self._state, new_value, self._blend)
        with np.errstate(over="raise", divide="raise"):
            return step(self._state, new_value, self._blend)

    def ewma_average(self) -> I:
        return self._state.average

    def local_range(self) -> LocalRange[I]:
        return LocalRange(self._state.local_min, self._state.local_max)

    def __repr__(self) -> str:
        s = self._state
        return (f"IntSeriesEwmaFilter(alpha={self._numerator!r}/{self._denominator!r}, "
                f"samples={s.sample_count}, average={s.average!r}, "
                f"range=[{s.local_min!r}, {s.local_max!r}))")
