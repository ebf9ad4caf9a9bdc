"""Business rules, rates and thresholds for regime analysis."""

from regime_analyzer.core.rules.tax_constants import (
    COMBINED_TAX_RATE,
    CSLL_ADDITIONAL_RATE,
    CSLL_RATE,
    DEFAULT_SECTOR,
    FEDERAL_BASE_RATE,
    IRPJ_ADDITIONAL_RATE,
    IRPJ_RATE,
    MONTHLY_PROFIT_THRESHOLD,
    NORTHEAST_STATES,
    PRESUMED_MARGINS,
    SIMPLES_RATES,
    arredondar,
    obter_aliquota_simples,
    obter_margem_presumida,
)

__all__ = [
    "COMBINED_TAX_RATE",
    "CSLL_ADDITIONAL_RATE",
    "CSLL_RATE",
    "DEFAULT_SECTOR",
    "FEDERAL_BASE_RATE",
    "IRPJ_ADDITIONAL_RATE",
    "IRPJ_RATE",
    "MONTHLY_PROFIT_THRESHOLD",
    "NORTHEAST_STATES",
    "PRESUMED_MARGINS",
    "SIMPLES_RATES",
    "arredondar",
    "obter_aliquota_simples",
    "obter_margem_presumida",
]
