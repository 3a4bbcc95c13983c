from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, TypeVar

from interfaces import EwmaFilter

T = TypeVar("T")

@dataclass
class SeriesHooks:
    on_sample: Optional[Callable[[int, Any, EwmaFilter], None]] = None
    on_end: Optional[Callable[[int, EwmaFilter], None]] = None

def run_series(flt: EwmaFilter[T], samples: Iterable[T], hooks: Optional[SeriesHooks] = None) -> T:
    """
    Push `samples` into one filter, in order, and return the final average.

    `on_sample(step, sample, flt)` fires after each push with the 0-based
    step; `on_end(count, flt)` fires once with the number of samples pushed.
    An empty iterable leaves the filter untouched.
    """
    hooks = hooks or SeriesHooks()
    steps = 0
    for sample in samples:
        flt.push_sample(sample)
        if hooks.on_sample is not None:
            hooks.on_sample(steps, sample, flt)
        steps += 1
    if hooks.on_end is not None:
        hooks.on_end(steps, flt)
    return flt.ewma_average()
