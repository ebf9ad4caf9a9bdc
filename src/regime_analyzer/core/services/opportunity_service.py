"""Opportunity aggregation: detection, scoring, ranking and summary."""

import logging
from typing import Optional

from regime_analyzer.core.analyzers.credits import detect_credits
from regime_analyzer.core.analyzers.deductions import detect_deductions
from regime_analyzer.core.analyzers.expense_optimization import (
    detect_expense_optimizations,
)
from regime_analyzer.core.analyzers.priority import score_opportunity
from regime_analyzer.core.analyzers.timing import detect_timing_strategies
from regime_analyzer.core.models.financial import CompanyContext, FinancialInput
from regime_analyzer.core.models.opportunity import (
    OpportunitiesResult,
    Opportunity,
    OpportunityFilter,
    OpportunitySummary,
)
from regime_analyzer.core.rules.tax_constants import HIGH_PRIORITY

logger = logging.getLogger(__name__)

# Detector order defines the generation (and tie-break) order
DETECTORS = (
    detect_deductions,
    detect_credits,
    detect_timing_strategies,
    detect_expense_optimizations,
)


class OpportunityService:
    """Runs every opportunity analyzer and ranks the results."""

    def __init__(self, financials: FinancialInput, company: Optional[CompanyContext] = None):
        self.financials = financials
        self.company = company or CompanyContext()

    def detect_all(self) -> list[Opportunity]:
        """Detect, score and rank all opportunities.

        Returns:
            Opportunities sorted by descending priority; ties keep
            generation order (deductions, credits, timing, expenses)
        """
        encontradas: list[Opportunity] = []
        for detector in DETECTORS:
            encontradas.extend(detector(self.financials, self.company))

        pontuadas = [
            opp.model_copy(update={"priority": score_opportunity(opp)})
            for opp in encontradas
        ]

        logger.debug("%d oportunidades detectadas", len(pontuadas))

        # sorted() is stable
        return sorted(pontuadas, key=lambda o: o.priority, reverse=True)

    def get_opportunities(self, filters: Optional[OpportunityFilter] = None) -> OpportunitiesResult:
        """Detect, filter and summarize opportunities."""
        oportunidades = self.detect_all()
        if filters is not None:
            oportunidades = filter_opportunities(oportunidades, filters)

        return OpportunitiesResult(
            opportunities=oportunidades,
            summary=summarize_opportunities(oportunidades),
        )


def filter_opportunities(
    opportunities: list[Opportunity], filters: OpportunityFilter
) -> list[Opportunity]:
    """Keep opportunities matching every filter that is set.

    Order is preserved.
    """
    resultado = opportunities

    if filters.category is not None:
        resultado = [o for o in resultado if o.category == filters.category]

    if filters.risk_level is not None:
        resultado = [o for o in resultado if o.risk_level == filters.risk_level]

    if filters.min_roi is not None:
        resultado = [o for o in resultado if o.roi >= filters.min_roi]

    return list(resultado)


def summarize_opportunities(opportunities: list[Opportunity]) -> OpportunitySummary:
    """Compute totals over a list of opportunities."""
    return OpportunitySummary(
        total_opportunities=len(opportunities),
        potential_annual_savings=sum(o.estimated_savings for o in opportunities),
        high_priority_count=sum(1 for o in opportunities if o.priority >= HIGH_PRIORITY),
        implementable_now=sum(1 for o in opportunities if o.is_immediate),
    )


def detect_all_opportunities(
    financials: FinancialInput, company: Optional[CompanyContext] = None
) -> list[Opportunity]:
    """Convenience function to detect and rank all opportunities.

    Args:
        financials: Company annual figures
        company: Company context (industry, state, description)

    Returns:
        Opportunities sorted by descending priority
    """
    service = OpportunityService(financials, company)
    return service.detect_all()


def get_opportunities(
    financials: FinancialInput,
    company: Optional[CompanyContext] = None,
    filters: Optional[OpportunityFilter] = None,
) -> OpportunitiesResult:
    """Convenience function to detect, filter and summarize opportunities."""
    service = OpportunityService(financials, company)
    return service.get_opportunities(filters)
