"""Expense optimization analyzer."""

from decimal import Decimal
from typing import Optional

from regime_analyzer.core.analyzers.priority import calculate_roi
from regime_analyzer.core.models.enums import (
    ImplementationEffort,
    OpportunityCategory,
    RiskLevel,
    TaxRegime,
)
from regime_analyzer.core.models.financial import CompanyContext, FinancialInput
from regime_analyzer.core.models.opportunity import Opportunity
from regime_analyzer.core.rules.tax_constants import (
    CONTRACTOR_COST,
    CONTRACTOR_SAVINGS_RATE,
    EQUIPMENT_SHARE,
    EQUIPMENT_THRESHOLD,
    LEASE_COST,
    LEASE_SAVINGS_RATE,
    OUTSOURCING_COST,
    OUTSOURCING_SAVINGS_RATE,
    PAYROLL_SHARE,
    PAYROLL_THRESHOLD,
    SERVICES_SHARE,
    SERVICES_THRESHOLD,
    arredondar,
)


class ExpenseOptimizationAnalyzer:
    """Finds ways to restructure operating expenses.

    Each check estimates a sub-budget as a fixed share of total expenses
    and only fires when that budget exceeds its own threshold:
    - Payroll (40%): contractor vs employee
    - Equipment (10%): lease vs purchase
    - Services (20%): outsourcing of non-core services
    """

    def __init__(self, financials: FinancialInput, company: Optional[CompanyContext] = None):
        self.financials = financials
        self.company = company or CompanyContext()
        self.opportunities: list[Opportunity] = []

    def analyze(self) -> list[Opportunity]:
        """Run all expense checks, in fixed order."""
        self._check_contractor_vs_employee()
        self._check_lease_vs_purchase()
        self._check_service_outsourcing()

        return self.opportunities

    def _budget(self, share: Decimal) -> Decimal:
        return self.financials.expenses * share

    def _check_contractor_vs_employee(self) -> None:
        folha_estimada = self._budget(PAYROLL_SHARE)
        if folha_estimada <= PAYROLL_THRESHOLD:
            return

        economia = arredondar(folha_estimada * CONTRACTOR_SAVINGS_RATE)

        self.opportunities.append(
            Opportunity(
                category=OpportunityCategory.EXPENSE_OPTIMIZATION,
                title="Contractor vs Employee Cost Analysis",
                description="Evaluate hiring contractors instead of employees for specific roles",
                estimated_savings=economia,
                implementation_cost=CONTRACTOR_COST,
                roi=calculate_roi(economia, CONTRACTOR_COST),
                risk_level=RiskLevel.MEDIUM,
                implementation_effort=ImplementationEffort.MEDIUM,
                applicable_regimes=[TaxRegime.REAL, TaxRegime.PRESUMED],
                requirements=[
                    "Regular service need (6+ months)",
                    "Clearly defined project scope",
                    "Contractor available in market",
                    "Proper legal documentation",
                ],
                tax_break="Lei nº 8,212/1991 - Contractor vs employee classification",
                timeline="30 days",
                action_items=[
                    "Identify roles suitable for contractors",
                    "Compare costs (employee vs contractor)",
                    "Ensure legal compliance",
                ],
                success_metrics=[
                    "Cost reduction achieved",
                    "No labor compliance issues",
                ],
            )
        )

    def _check_lease_vs_purchase(self) -> None:
        orcamento_equipamentos = self._budget(EQUIPMENT_SHARE)
        if orcamento_equipamentos <= EQUIPMENT_THRESHOLD:
            return

        economia = arredondar(orcamento_equipamentos * LEASE_SAVINGS_RATE)

        self.opportunities.append(
            Opportunity(
                category=OpportunityCategory.EXPENSE_OPTIMIZATION,
                title="Equipment Lease vs Purchase Analysis",
                description="Compare benefits of leasing vs purchasing equipment",
                estimated_savings=economia,
                implementation_cost=LEASE_COST,
                roi=calculate_roi(economia, LEASE_COST),
                risk_level=RiskLevel.LOW,
                implementation_effort=ImplementationEffort.MEDIUM,
                applicable_regimes=[TaxRegime.REAL, TaxRegime.PRESUMED],
                requirements=[
                    "Equipment cost > R$500k",
                    "Lease providers available",
                    "Technology may become obsolete",
                    "Regular equipment replacement",
                ],
                tax_break="Art. 305-309 RIR/1999 - Lease vs depreciation",
                timeline="30 days",
                action_items=[
                    "Get lease quotes",
                    "Compare TCO (total cost of ownership)",
                    "Evaluate equipment lifecycle",
                ],
                success_metrics=[
                    "Lower total equipment costs",
                    "Improved cash flow",
                ],
            )
        )

    def _check_service_outsourcing(self) -> None:
        custo_servicos = self._budget(SERVICES_SHARE)
        if custo_servicos <= SERVICES_THRESHOLD:
            return

        economia = arredondar(custo_servicos * OUTSOURCING_SAVINGS_RATE)

        self.opportunities.append(
            Opportunity(
                category=OpportunityCategory.EXPENSE_OPTIMIZATION,
                title="Service Outsourcing Opportunity",
                description="Outsource non-core services to reduce overhead",
                estimated_savings=economia,
                implementation_cost=OUTSOURCING_COST,
                roi=calculate_roi(economia, OUTSOURCING_COST),
                risk_level=RiskLevel.MEDIUM,
                implementation_effort=ImplementationEffort.HIGH,
                applicable_regimes=[TaxRegime.REAL, TaxRegime.PRESUMED],
                requirements=[
                    "Non-core service spending > R$500k",
                    "Quality service providers available",
                    "Service SLA requirements clear",
                    "Proper vendor contracts",
                ],
                tax_break="Lei nº 12,973/2014 - Service outsourcing",
                timeline="Next quarter",
                action_items=[
                    "Identify non-core services",
                    "Request RFP from vendors",
                    "Evaluate vendor capabilities",
                ],
                success_metrics=[
                    "Service cost reduction",
                    "Improved service quality",
                ],
            )
        )


def detect_expense_optimizations(
    financials: FinancialInput, company: Optional[CompanyContext] = None
) -> list[Opportunity]:
    """Convenience function to run expense optimization analysis.

    Args:
        financials: Company annual figures
        company: Company context (unused by the current checks)

    Returns:
        Expense optimization opportunities in generation order
    """
    analyzer = ExpenseOptimizationAnalyzer(financials, company)
    return analyzer.analyze()
