"""Regime Analyzer - comparação de regimes tributários e oportunidades fiscais."""

__version__ = "0.1.0"
