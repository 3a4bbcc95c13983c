from __future__ import annotations
import csv, os
from typing import Any, Callable, Dict, List, Optional

from interfaces import EwmaFilter, Logger

ALL_KEYS = [
    "step",
    "series/sample", "series/average", "series/local_min", "series/local_max",
]

SampleLogFn = Callable[[int, Any, EwmaFilter], None]


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        scalars = {"step": step, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        self._file.close()


class MemoryLogger:
    """Keeps logged rows in a list; handy for tests and notebooks."""
    def __init__(self) -> None:
        self.rows: List[Dict[str, Any]] = []

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        self.rows.append({"step": step, **scalars})

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


def make_sample_logger(
    logger: Logger,
    log_every: int = 1,
    prefix: str = "series",
    on_log: Optional[Callable[[Dict[str, Any]], None]] = None,
) -> SampleLogFn:
    """
    Returns a function(step, sample, flt) -> None that logs the filter's
    average and fading range every `log_every` samples.
    Decouples the caller's loop from logging policy.
    """
    log_every = max(1, int(log_every))

    def _on_sample(step: int, sample: Any, flt: EwmaFilter) -> None:
        if step % log_every != 0:
            return
        lo, hi = flt.local_range()
        scalars = {
            f"{prefix}/sample": sample,
            f"{prefix}/average": flt.ewma_average(),
            f"{prefix}/local_min": lo,
            f"{prefix}/local_max": hi,
        }
        logger.log(int(step), scalars)
        if on_log is not None:
            on_log(scalars)

    return _on_sample
