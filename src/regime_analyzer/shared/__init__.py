"""Shared utilities for Regime Analyzer."""

from regime_analyzer.shared.formatters import (
    format_cents,
    format_currency,
    format_percentage,
    parse_reais,
)
from regime_analyzer.shared.validators import (
    UFS,
    normalize_uf,
    validar_uf,
)

__all__ = [
    # Formatters
    "format_cents",
    "format_currency",
    "format_percentage",
    "parse_reais",
    # Validators
    "UFS",
    "normalize_uf",
    "validar_uf",
]
