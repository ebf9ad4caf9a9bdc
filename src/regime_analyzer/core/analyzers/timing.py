"""Timing strategy analyzer (revenue deferral, expense acceleration)."""

from typing import Optional

from regime_analyzer.core.analyzers.priority import calculate_roi
from regime_analyzer.core.models.enums import (
    ImplementationEffort,
    OpportunityCategory,
    RiskLevel,
    TaxRegime,
)
from regime_analyzer.core.models.financial import CompanyContext, FinancialInput
from regime_analyzer.core.models.opportunity import IMMEDIATE, Opportunity
from regime_analyzer.core.rules.tax_constants import (
    COMBINED_TAX_RATE,
    EXPENSE_ACCELERATION_CAP,
    EXPENSE_ACCELERATION_RATE,
    REVENUE_DEFERRAL_SHARE,
    REVENUE_DEFERRAL_THRESHOLD,
    arredondar,
)


class TimingAnalyzer:
    """Finds strategies that shift revenue or expenses between fiscal years."""

    def __init__(self, financials: FinancialInput, company: Optional[CompanyContext] = None):
        self.financials = financials
        self.company = company or CompanyContext()
        self.opportunities: list[Opportunity] = []

    def analyze(self) -> list[Opportunity]:
        """Run all timing checks, in fixed order."""
        self._check_revenue_deferral()
        self._check_expense_acceleration()

        return self.opportunities

    def _check_revenue_deferral(self) -> None:
        """Defer invoicing of large contracts to the next year.

        High risk by construction, so it always ranks low.
        """
        if self.financials.gross_revenue <= REVENUE_DEFERRAL_THRESHOLD:
            return

        economia = arredondar(
            self.financials.gross_revenue * REVENUE_DEFERRAL_SHARE * COMBINED_TAX_RATE
        )

        self.opportunities.append(
            Opportunity(
                category=OpportunityCategory.TIMING,
                title="Strategic Revenue Deferral",
                description="Defer invoicing of large contracts to next year for tax optimization",
                estimated_savings=economia,
                implementation_cost=0,
                roi=calculate_roi(economia, 0),
                risk_level=RiskLevel.HIGH,
                implementation_effort=ImplementationEffort.MEDIUM,
                applicable_regimes=[TaxRegime.REAL, TaxRegime.PRESUMED],
                requirements=[
                    "Large contracts > R$500k",
                    "Flexible billing terms with clients",
                    "Strong cash flow management",
                    "Proper documentation of deferral",
                ],
                tax_break="Art. 12 Lei nº 9,250/1995 - Revenue recognition",
                timeline="Next quarter",
                action_items=[
                    "Identify deferrable contracts",
                    "Negotiate flexible payment terms",
                    "Document commercial rationale",
                ],
                success_metrics=[
                    "Deferred revenue properly documented",
                    "Reduced current year tax liability",
                ],
            )
        )

    def _check_expense_acceleration(self) -> None:
        """Bring deductible expenses forward before year-end."""
        despesas_antecipaveis = min(
            self.financials.expenses * EXPENSE_ACCELERATION_RATE, EXPENSE_ACCELERATION_CAP
        )
        economia = arredondar(despesas_antecipaveis * COMBINED_TAX_RATE)

        self.opportunities.append(
            Opportunity(
                category=OpportunityCategory.TIMING,
                title="Year-End Expense Acceleration",
                description="Accelerate deductible expenses before year-end for immediate tax benefit",
                estimated_savings=economia,
                implementation_cost=0,
                roi=calculate_roi(economia, 0),
                risk_level=RiskLevel.LOW,
                implementation_effort=ImplementationEffort.LOW,
                applicable_regimes=[TaxRegime.REAL, TaxRegime.PRESUMED],
                requirements=[
                    "Planned expenses > R$100k",
                    "Strong supplier relationships",
                    "Available cash flow",
                    "Documented business need",
                ],
                tax_break="Art. 13 Lei nº 8,981/1995 - Expense recognition",
                timeline=IMMEDIATE,
                action_items=[
                    "Identify discretionary expenses",
                    "Negotiate delivery schedules",
                    "Execute contracts before year-end",
                ],
                success_metrics=[
                    "Expenses properly deducted",
                    "Reduced year-end tax",
                ],
            )
        )


def detect_timing_strategies(
    financials: FinancialInput, company: Optional[CompanyContext] = None
) -> list[Opportunity]:
    """Convenience function to run timing analysis.

    Args:
        financials: Company annual figures
        company: Company context (unused by the current checks)

    Returns:
        Timing opportunities in generation order
    """
    analyzer = TimingAnalyzer(financials, company)
    return analyzer.analyze()
