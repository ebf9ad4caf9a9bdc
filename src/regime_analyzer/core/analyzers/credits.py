"""Tax credit opportunity analyzer."""

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
    EXPORT_BENEFIT_SHARE,
    EXPORT_COST,
    EXPORT_KEYWORDS,
    EXPORT_REVENUE_SHARE,
    NORTHEAST_STATES,
    SUDENE_COST,
    SUDENE_CREDIT_SHARE,
    arredondar,
)


class CreditAnalyzer:
    """Finds regional and export tax credits.

    Checks for:
    - SUDENE regional development credit (Northeast states)
    - Export incentives (description mentions export activity)
    """

    def __init__(self, financials: FinancialInput, company: Optional[CompanyContext] = None):
        self.financials = financials
        self.company = company or CompanyContext()
        self.opportunities: list[Opportunity] = []

    def analyze(self) -> list[Opportunity]:
        """Run all credit checks, in fixed order."""
        self._check_sudene()
        self._check_export()

        return self.opportunities

    def _check_sudene(self) -> None:
        """SUDENE reduces up to 75% of IRPJ for Northeast companies."""
        if self.company.state not in NORTHEAST_STATES:
            return

        economia = arredondar(
            self.financials.gross_revenue * COMBINED_TAX_RATE * SUDENE_CREDIT_SHARE
        )

        self.opportunities.append(
            Opportunity(
                category=OpportunityCategory.CREDIT,
                title="SUDENE Regional Development Credit",
                description="Tax credit for businesses in Northeast region (up to 75% of IRPJ)",
                estimated_savings=economia,
                implementation_cost=SUDENE_COST,
                roi=calculate_roi(economia, SUDENE_COST),
                risk_level=RiskLevel.MEDIUM,
                implementation_effort=ImplementationEffort.HIGH,
                applicable_regimes=[TaxRegime.REAL, TaxRegime.PRESUMED],
                requirements=[
                    "Business located in Northeast region",
                    "Meet SUDENE income requirements",
                    "File SUDENE pre-approval request",
                    "Annual compliance reporting",
                ],
                tax_break="Lei Complementar nº 125/2007 - SUDENE benefits",
                timeline="Next quarter",
                action_items=[
                    "Check SUDENE eligibility",
                    "File pre-approval request",
                    "Engage regional tax advisor",
                ],
                success_metrics=[
                    "SUDENE approval obtained",
                    "Credit applied to tax returns",
                ],
            )
        )

    def _check_export(self) -> None:
        """Export incentives, triggered by keywords in the free-text description."""
        descricao = self.company.description or ""
        if not any(kw in descricao for kw in EXPORT_KEYWORDS):
            return

        # 10% of revenue assumed to be exports, 25% of that recovered
        economia = arredondar(
            self.financials.gross_revenue * EXPORT_REVENUE_SHARE * EXPORT_BENEFIT_SHARE
        )

        self.opportunities.append(
            Opportunity(
                category=OpportunityCategory.CREDIT,
                title="Export Tax Credit",
                description="Tax credit or exemption for export-related activities",
                estimated_savings=economia,
                implementation_cost=EXPORT_COST,
                roi=calculate_roi(economia, EXPORT_COST),
                risk_level=RiskLevel.LOW,
                implementation_effort=ImplementationEffort.MEDIUM,
                applicable_regimes=[TaxRegime.REAL, TaxRegime.PRESUMED],
                requirements=[
                    "Active export contracts",
                    "Export documentation (invoices, shipping)",
                    "Payment proof in foreign currency",
                ],
                tax_break="Lei de Modernização Tributária - Export incentives",
                timeline=IMMEDIATE,
                action_items=[
                    "Quantify export revenue",
                    "Organize export documentation",
                    "File export credit claims",
                ],
                success_metrics=[
                    "Export credit approved",
                    "Reduced tax liability on export revenue",
                ],
            )
        )


def detect_credits(
    financials: FinancialInput, company: Optional[CompanyContext] = None
) -> list[Opportunity]:
    """Convenience function to run credit analysis.

    Args:
        financials: Company annual figures
        company: Company context (state and description are used)

    Returns:
        Credit opportunities in generation order
    """
    analyzer = CreditAnalyzer(financials, company)
    return analyzer.analyze()
