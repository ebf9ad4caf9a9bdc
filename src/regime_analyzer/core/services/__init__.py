"""Domain services for Regime Analyzer."""

from regime_analyzer.core.services.forecast_service import (
    RegimeForecaster,
    forecast_regimes,
)
from regime_analyzer.core.services.opportunity_service import (
    OpportunityService,
    detect_all_opportunities,
    filter_opportunities,
    get_opportunities,
    summarize_opportunities,
)

__all__ = [
    "OpportunityService",
    "RegimeForecaster",
    "detect_all_opportunities",
    "filter_opportunities",
    "forecast_regimes",
    "get_opportunities",
    "summarize_opportunities",
]
