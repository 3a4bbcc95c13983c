# interfaces/__init__.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterator, Protocol, TypeVar

T = TypeVar("T")

@dataclass(frozen=True)
class LocalRange(Generic[T]):
    """Fading [start, end) envelope. Half-open by name only; end may equal a pushed sample."""
    start: T
    end: T

    def __iter__(self) -> Iterator[T]:
        yield self.start
        yield self.end

    def __contains__(self, x: Any) -> bool:
        return self.start <= x < self.end

class EwmaFilter(Protocol[T]):
    def push_sample(self, new_value: T) -> T: ...
    def ewma_average(self) -> T: ...
    def local_range(self) -> LocalRange[T]: ...

# from stream/logging.py
class Logger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...
