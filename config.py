# config.py
from dataclasses import dataclass, replace

DEFAULT_ALPHA = 0.01
# 1/100 fades at the same rate as DEFAULT_ALPHA
DEFAULT_NUMERATOR = 1
DEFAULT_DENOMINATOR = 100

@dataclass(frozen=True, slots=True)
class FilterConfig:
    # float mode
    alpha: float = DEFAULT_ALPHA

    # integer mode
    alpha_numerator: int = DEFAULT_NUMERATOR
    alpha_denominator: int = DEFAULT_DENOMINATOR

    # run filters.validation checks once at construction
    validate: bool = False

    def with_(self, **kwargs) -> "FilterConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
