"""Tests for the expense optimization analyzer."""

import pytest

from regime_analyzer.core.analyzers.expense_optimization import (
    ExpenseOptimizationAnalyzer,
    detect_expense_optimizations,
)
from regime_analyzer.core.models import (
    FinancialInput,
    ImplementationEffort,
    OpportunityCategory,
    RiskLevel,
)

CONTRACTOR = "Contractor vs Employee Cost Analysis"
LEASE = "Equipment Lease vs Purchase Analysis"
OUTSOURCING = "Service Outsourcing Opportunity"


class TestExpenseOptimization:
    """Tests for ExpenseOptimizationAnalyzer."""

    @pytest.mark.parametrize(
        "expenses,expected",
        [
            (0, []),
            (10000000, []),
            (20000001, [LEASE]),
            (25000000, [LEASE]),
            (25000001, [CONTRACTOR, LEASE, OUTSOURCING]),
            (30000000, [CONTRACTOR, LEASE, OUTSOURCING]),
        ],
    )
    def test_gates(self, expenses, expected):
        """Test each check fires only when its sub-budget exceeds its threshold."""
        opportunities = detect_expense_optimizations(
            FinancialInput(gross_revenue=0, expenses=expenses)
        )
        assert [o.title for o in opportunities] == expected

    def test_values(self):
        """Test savings, cost, ROI and risk of each opportunity."""
        analyzer = ExpenseOptimizationAnalyzer(FinancialInput(gross_revenue=0, expenses=30000000))
        contractor, lease, outsourcing = analyzer.analyze()

        assert contractor.category == OpportunityCategory.EXPENSE_OPTIMIZATION
        assert contractor.estimated_savings == 2400000
        assert contractor.implementation_cost == 500000
        assert contractor.roi == 380.0
        assert contractor.risk_level == RiskLevel.MEDIUM

        assert lease.estimated_savings == 450000
        assert lease.roi == 125.0
        assert lease.risk_level == RiskLevel.LOW

        assert outsourcing.estimated_savings == 1500000
        assert outsourcing.roi == 50.0
        assert outsourcing.implementation_effort == ImplementationEffort.HIGH
