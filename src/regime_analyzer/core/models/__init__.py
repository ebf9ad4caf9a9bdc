"""Domain models for tax regime analysis."""

from regime_analyzer.core.models.enums import (
    ImplementationEffort,
    OpportunityCategory,
    RiskLevel,
    Sector,
    TaxRegime,
)
from regime_analyzer.core.models.financial import CompanyContext, FinancialInput
from regime_analyzer.core.models.forecast import (
    ForecastParameters,
    ForecastSummary,
    MonthlyForecast,
    RegimeForecast,
    TaxForecast,
)
from regime_analyzer.core.models.opportunity import (
    IMMEDIATE,
    OpportunitiesResult,
    Opportunity,
    OpportunityFilter,
    OpportunitySummary,
)
from regime_analyzer.core.models.regime import RegimeComparison, RegimeResult

__all__ = [
    "CompanyContext",
    "FinancialInput",
    "ForecastParameters",
    "ForecastSummary",
    "IMMEDIATE",
    "ImplementationEffort",
    "MonthlyForecast",
    "OpportunitiesResult",
    "Opportunity",
    "OpportunityCategory",
    "OpportunityFilter",
    "OpportunitySummary",
    "RegimeComparison",
    "RegimeForecast",
    "RegimeResult",
    "RiskLevel",
    "Sector",
    "TaxForecast",
    "TaxRegime",
]
