from __future__ import annotations
from typing import Callable, Generic, TypeVar

from config import DEFAULT_ALPHA, FilterConfig
from interfaces import LocalRange
from .update import FilterState, step
from .validation import check_alpha

F = TypeVar("F")

class FloatSeriesEwmaFilter(Generic[F]):
    """
    Exponentially weighted moving average of a float series, with a local
    min/max that fades toward recent values instead of holding all-time extremes.

    `dtype` fixes the float width: `float` (double) by default, or a numpy
    type such as `np.float32`. Samples and alpha are coerced to it.
    Bigger alpha fades old values faster.
    """
    __slots__ = ("_dtype", "_alpha", "_state")

    def __init__(self, alpha: float, dtype: Callable[..., F] = float, *, validate: bool = False):
        if validate:
            check_alpha(alpha)
        zero = dtype(0)
        self._dtype = dtype
        self._alpha: F = dtype(alpha)
        self._state: FilterState[F] = FilterState(0, zero, zero, zero)

    @classmethod
    def default(cls, dtype: Callable[..., F] = float) -> "FloatSeriesEwmaFilter[F]":
        return cls(DEFAULT_ALPHA, dtype)

    @classmethod
    def from_config(cls, cfg: FilterConfig, dtype: Callable[..., F] = float) -> "FloatSeriesEwmaFilter[F]":
        return cls(cfg.alpha, dtype, validate=cfg.validate)

    @property
    def alpha(self) -> F:
        return self._alpha

    @property
    def sample_count(self) -> int:
        return self._state.sample_count

    def _blend(self, current: F, target: F) -> F:
        return current + self._alpha * (target - current)

    def push_sample(self, new_value: F) -> F:
        """Push the next sample in the series. Returns the updated average."""
        return step(self._state, self._dtype(new_value), self._blend)

    def ewma_average(self) -> F:
        return self._state.average

    def local_range(self) -> LocalRange[F]:
        return LocalRange(self._state.local_min, self._state.local_max)

    def __repr__(self) -> str:
        s = self._state
        return (f"FloatSeriesEwmaFilter(alpha={self._alpha!r}, samples={s.sample_count}, "
                f"average={s.average!r}, range=[{s.local_min!r}, {s.local_max!r}))")
