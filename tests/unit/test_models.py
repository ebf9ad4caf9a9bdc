"""Tests for domain models."""

import pytest
from pydantic import ValidationError

from regime_analyzer.core.models import (
    CompanyContext,
    FinancialInput,
    ImplementationEffort,
    Opportunity,
    OpportunityCategory,
    RegimeResult,
    RiskLevel,
    TaxRegime,
)


class TestFinancialInput:
    """Tests for FinancialInput model."""

    def test_defaults(self):
        """Test optional amounts default to zero."""
        financials = FinancialInput(gross_revenue=100000)

        assert financials.expenses == 0
        assert financials.deductions == 0
        assert financials.tax_credits == 0
        assert financials.previous_payments == 0
        assert financials.sector is None

    def test_revenue_required(self):
        with pytest.raises(ValidationError):
            FinancialInput()

    @pytest.mark.parametrize(
        "field", ["gross_revenue", "expenses", "deductions", "tax_credits", "previous_payments"]
    )
    def test_negative_amounts_rejected(self, field):
        """Test every amount must be non-negative."""
        values = {"gross_revenue": 0, field: -1}
        with pytest.raises(ValidationError):
            FinancialInput(**values)

    def test_frozen(self):
        """Test input cannot be modified."""
        financials = FinancialInput(gross_revenue=100000)
        with pytest.raises(ValidationError):
            financials.gross_revenue = 1


class TestCompanyContext:
    """Tests for CompanyContext model."""

    def test_all_optional(self):
        context = CompanyContext()

        assert context.industry is None
        assert context.state is None
        assert context.description is None

    def test_state_normalized(self):
        """Test UF code is stripped and upper-cased."""
        assert CompanyContext(state=" ba ").state == "BA"
        assert CompanyContext(state="Pe").state == "PE"


class TestRegimeResult:
    """Tests for RegimeResult model."""

    def test_negative_liability_rejected(self):
        with pytest.raises(ValidationError):
            RegimeResult(
                regime=TaxRegime.REAL,
                effective_tax_rate=0.24,
                annual_tax_liability=-1,
                average_monthly_payment=0,
            )

    def test_regime_labels(self):
        """Test display labels replace underscores."""
        assert TaxRegime.SIMPLIFIED.label == "SIMPLES NACIONAL"
        assert TaxRegime.PRESUMED.label == "LUCRO PRESUMIDO"
        assert TaxRegime.REAL.label == "LUCRO REAL"


class TestOpportunity:
    """Tests for Opportunity model."""

    def make(self, **overrides) -> Opportunity:
        values = dict(
            category=OpportunityCategory.TIMING,
            title="Test",
            description="Test",
            estimated_savings=100000,
            implementation_cost=30000,
            roi=233.33,
            risk_level=RiskLevel.LOW,
            implementation_effort=ImplementationEffort.LOW,
        )
        values.update(overrides)
        return Opportunity(**values)

    def test_defaults(self):
        opp = self.make()

        assert opp.priority == 5
        assert opp.timeline == "Immediate"
        assert opp.is_immediate
        assert opp.applicable_regimes == []

    def test_net_benefit(self):
        assert self.make().net_benefit == 70000
        assert self.make(implementation_cost=200000).net_benefit == -100000

    def test_not_immediate(self):
        assert not self.make(timeline="30 days").is_immediate

    @pytest.mark.parametrize("priority", [0, 11])
    def test_priority_range(self, priority):
        """Test priority must lie in [1, 10]."""
        with pytest.raises(ValidationError):
            self.make(priority=priority)

    def test_model_copy_leaves_source_untouched(self):
        """Test the scored copy does not change the unscored opportunity."""
        opp = self.make()
        scored = opp.model_copy(update={"priority": 9})

        assert scored.priority == 9
        assert opp.priority == 5
