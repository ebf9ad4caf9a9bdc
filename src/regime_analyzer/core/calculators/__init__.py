"""Regime calculators and comparison engine."""

from regime_analyzer.core.calculators.comparison import (
    RegimeComparator,
    compare_regimes,
)
from regime_analyzer.core.calculators.regimes import (
    calculate_presumed,
    calculate_real,
    calculate_simplified,
)

__all__ = [
    "RegimeComparator",
    "calculate_presumed",
    "calculate_real",
    "calculate_simplified",
    "compare_regimes",
]
