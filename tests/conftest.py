# tests/conftest.py
import os
import sys

# Ensure project root is importable (so filters.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

@pytest.fixture
def ramp():
    return range(1000)

@pytest.fixture
def float_filter_factory():
    from filters.float_filter import FloatSeriesEwmaFilter
    def make(alpha=None, dtype=float, **kwargs):
        if alpha is None:
            return FloatSeriesEwmaFilter.default(dtype)
        return FloatSeriesEwmaFilter(alpha, dtype, **kwargs)
    return make

@pytest.fixture
def int_filter_factory():
    from filters.int_filter import IntSeriesEwmaFilter
    def make(numerator=None, denominator=None, dtype=int, **kwargs):
        if numerator is None and denominator is None:
            return IntSeriesEwmaFilter.default(dtype)
        return IntSeriesEwmaFilter(numerator, denominator, dtype, **kwargs)
    return make
