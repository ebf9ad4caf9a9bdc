"""ROI and priority scoring for tax opportunities."""

from decimal import Decimal

from regime_analyzer.core.models.opportunity import Opportunity
from regime_analyzer.core.rules.tax_constants import (
    BASE_PRIORITY_SCORE,
    EFFORT_PENALTY,
    MAX_PRIORITY,
    MIN_PRIORITY,
    RISK_PENALTY,
    ROI_BONUS_CAP,
    ROI_BONUS_DIVISOR,
    ROI_FREE_IMPLEMENTATION,
    arredondar,
)


def calculate_roi(estimated_savings: int, implementation_cost: int) -> float:
    """Return on investment, in percent.

    A zero-cost opportunity is defined as 100% ROI.

    Args:
        estimated_savings: Annual savings (centavos)
        implementation_cost: One-off cost (centavos)

    Returns:
        ROI percentage, negative when savings do not cover the cost
    """
    if implementation_cost == 0:
        return ROI_FREE_IMPLEMENTATION
    return (estimated_savings - implementation_cost) / implementation_cost * 100


def score_opportunity(opportunity: Opportunity) -> int:
    """Score an opportunity from 1 (lowest) to 10 (highest priority).

    Base 5, plus ROI/50 capped at +3, minus effort (0/1/2) and
    risk (0/0.5/1.5) penalties. Rounded half-up, then clamped.
    """
    score = BASE_PRIORITY_SCORE
    score += min(Decimal(str(opportunity.roi)) / ROI_BONUS_DIVISOR, ROI_BONUS_CAP)
    score += EFFORT_PENALTY[opportunity.implementation_effort.value]
    score += RISK_PENALTY[opportunity.risk_level.value]

    return max(MIN_PRIORITY, min(MAX_PRIORITY, arredondar(score)))
