"""Deduction opportunity analyzer."""

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
    DEPRECIATION_CAP,
    DEPRECIATION_COST,
    DEPRECIATION_EXPENSE_THRESHOLD,
    DEPRECIATION_RATE,
    HOME_OFFICE_CAP,
    HOME_OFFICE_RATE,
    RD_COST,
    RD_CREDIT_SHARE,
    RD_INDUSTRY_KEYWORDS,
    RD_SPENDING_SHARE,
    arredondar,
)


class DeductionAnalyzer:
    """Finds deductible expenses the company may not be using.

    Checks for:
    - Home office expenses (always applicable)
    - Equipment depreciation (significant expenses only)
    - R&D incentives under Lei do Bem (technology/innovation companies)
    """

    def __init__(self, financials: FinancialInput, company: Optional[CompanyContext] = None):
        self.financials = financials
        self.company = company or CompanyContext()
        self.opportunities: list[Opportunity] = []

    def analyze(self) -> list[Opportunity]:
        """Run all deduction checks, in fixed order."""
        self._check_home_office()
        self._check_equipment_depreciation()
        self._check_rd_credit()

        return self.opportunities

    def _check_home_office(self) -> None:
        """Home office share of rent, utilities and internet."""
        economia = min(arredondar(self.financials.expenses * HOME_OFFICE_RATE), HOME_OFFICE_CAP)

        self.opportunities.append(
            Opportunity(
                category=OpportunityCategory.DEDUCTION,
                title="Home Office Deduction",
                description="Deduct home office expenses including rent, utilities, and internet",
                estimated_savings=economia,
                implementation_cost=0,
                roi=calculate_roi(economia, 0),
                risk_level=RiskLevel.MEDIUM,
                implementation_effort=ImplementationEffort.LOW,
                applicable_regimes=[TaxRegime.REAL, TaxRegime.PRESUMED],
                requirements=[
                    "Work exclusively from home",
                    "Document space allocation (percentage of house)",
                    "Track utility proportions (electricity, water, internet)",
                    "Keep rental contracts and utility bills",
                ],
                tax_break="Art. 12-E, Lei nº 14.754/2023 - Home office deduction",
                timeline=IMMEDIATE,
                action_items=[
                    "Calculate home office percentage",
                    "Gather utility bills and rental contract",
                    "Document in tax records",
                ],
                success_metrics=[
                    "Deduction approved by tax authority",
                    "Reduce taxable income",
                ],
            )
        )

    def _check_equipment_depreciation(self) -> None:
        """Depreciation of equipment, machinery and furniture."""
        if self.financials.expenses <= DEPRECIATION_EXPENSE_THRESHOLD:
            return

        economia = min(arredondar(self.financials.expenses * DEPRECIATION_RATE), DEPRECIATION_CAP)

        self.opportunities.append(
            Opportunity(
                category=OpportunityCategory.DEDUCTION,
                title="Equipment Depreciation",
                description="Depreciate business equipment, machinery, and furniture",
                estimated_savings=economia,
                implementation_cost=DEPRECIATION_COST,
                roi=calculate_roi(economia, DEPRECIATION_COST),
                risk_level=RiskLevel.LOW,
                implementation_effort=ImplementationEffort.MEDIUM,
                applicable_regimes=[TaxRegime.REAL, TaxRegime.PRESUMED],
                requirements=[
                    "Equipment cost > R$1,000",
                    "Document purchase date, cost, and useful life",
                    "Create depreciation schedule",
                    "Keep equipment inventory",
                ],
                tax_break="Art. 305-309, RIR/1999 - Depreciation of assets",
                timeline="30 days",
                action_items=[
                    "Inventory all equipment and machinery",
                    "Calculate depreciation schedules",
                    "Create asset registry",
                ],
                success_metrics=[
                    "Depreciation approved in tax audit",
                    "Reduce annual taxable income",
                ],
            )
        )

    def _check_rd_credit(self) -> None:
        """Lei do Bem credit for companies tagged as technology/innovation.

        Keyword match is a case-sensitive substring test on the industry tag.
        """
        industria = self.company.industry or ""
        if not any(kw in industria for kw in RD_INDUSTRY_KEYWORDS):
            return

        # 5% of expenses assumed to be R&D, 25% of that returned as credit
        economia = arredondar(self.financials.expenses * RD_SPENDING_SHARE * RD_CREDIT_SHARE)

        self.opportunities.append(
            Opportunity(
                category=OpportunityCategory.CREDIT,
                title="Research & Development Tax Credit",
                description="Tax credit for R&D spending under Lei do Bem (Law 11,196/05)",
                estimated_savings=economia,
                implementation_cost=RD_COST,
                roi=calculate_roi(economia, RD_COST),
                risk_level=RiskLevel.MEDIUM,
                implementation_effort=ImplementationEffort.HIGH,
                applicable_regimes=[TaxRegime.REAL],
                requirements=[
                    "Document R&D projects and activities",
                    "Track R&D-related expenses",
                    "Annual compliance reporting to INPI",
                    "Technical documentation of innovations",
                ],
                tax_break="Lei nº 11,196/2005 - Tax incentives for innovation",
                timeline="Next quarter",
                action_items=[
                    "Document all R&D projects",
                    "Create expense tracking system",
                    "Prepare documentation for INPI",
                ],
                success_metrics=[
                    "INPI approval of R&D projects",
                    "Tax credit applied to annual tax",
                ],
            )
        )


def detect_deductions(
    financials: FinancialInput, company: Optional[CompanyContext] = None
) -> list[Opportunity]:
    """Convenience function to run deduction analysis.

    Args:
        financials: Company annual figures
        company: Company context (industry tag is used)

    Returns:
        Deduction opportunities in generation order
    """
    analyzer = DeductionAnalyzer(financials, company)
    return analyzer.analyze()
