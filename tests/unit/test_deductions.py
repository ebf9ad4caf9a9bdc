"""Tests for the deduction analyzer."""

from regime_analyzer.core.analyzers.deductions import DeductionAnalyzer, detect_deductions
from regime_analyzer.core.models import (
    CompanyContext,
    FinancialInput,
    ImplementationEffort,
    OpportunityCategory,
    RiskLevel,
    TaxRegime,
)


class TestHomeOffice:
    """Tests for the home office deduction."""

    def test_always_emitted(self):
        """Test home office is suggested even with zero expenses."""
        opportunities = detect_deductions(FinancialInput(gross_revenue=0))

        assert [o.title for o in opportunities] == ["Home Office Deduction"]
        assert opportunities[0].estimated_savings == 0

    def test_seven_percent_of_expenses(self):
        """Test savings are 7% of expenses."""
        home_office = detect_deductions(FinancialInput(gross_revenue=0, expenses=4000000))[0]

        assert home_office.category == OpportunityCategory.DEDUCTION
        assert home_office.estimated_savings == 280000
        assert home_office.implementation_cost == 0
        assert home_office.roi == 100
        assert home_office.risk_level == RiskLevel.MEDIUM
        assert home_office.implementation_effort == ImplementationEffort.LOW
        assert home_office.timeline == "Immediate"
        assert home_office.applicable_regimes == [TaxRegime.REAL, TaxRegime.PRESUMED]

    def test_capped(self):
        """Test savings are capped at R$ 12k."""
        home_office = detect_deductions(FinancialInput(gross_revenue=0, expenses=100000000))[0]
        assert home_office.estimated_savings == 1200000


class TestEquipmentDepreciation:
    """Tests for the equipment depreciation deduction."""

    def test_below_threshold_only_home_office(self):
        """Test small expenses yield exactly the home office opportunity."""
        opportunities = detect_deductions(FinancialInput(gross_revenue=0, expenses=4000000))
        assert [o.title for o in opportunities] == ["Home Office Deduction"]

    def test_threshold_is_exclusive(self):
        """Test expenses equal to the threshold do not trigger depreciation."""
        opportunities = detect_deductions(FinancialInput(gross_revenue=0, expenses=5000000))
        assert "Equipment Depreciation" not in [o.title for o in opportunities]

    def test_above_threshold(self):
        """Test significant expenses add depreciation after home office."""
        opportunities = detect_deductions(FinancialInput(gross_revenue=0, expenses=10000000))

        assert [o.title for o in opportunities] == [
            "Home Office Deduction",
            "Equipment Depreciation",
        ]
        depreciation = opportunities[1]
        assert depreciation.estimated_savings == 500000
        assert depreciation.implementation_cost == 100000
        assert depreciation.roi == 400.0
        assert depreciation.risk_level == RiskLevel.LOW
        assert depreciation.implementation_effort == ImplementationEffort.MEDIUM

    def test_capped(self):
        """Test depreciation savings are capped at R$ 50k."""
        opportunities = detect_deductions(FinancialInput(gross_revenue=0, expenses=500000000))
        assert opportunities[1].estimated_savings == 5000000


class TestRDCredit:
    """Tests for the Lei do Bem R&D credit."""

    def test_technology_industry(self):
        """Test technology companies get the R&D credit."""
        opportunities = detect_deductions(
            FinancialInput(gross_revenue=0, expenses=100000000),
            CompanyContext(industry="TECNOLOGIA DA INFORMAÇÃO"),
        )

        rd = opportunities[-1]
        assert rd.title == "Research & Development Tax Credit"
        assert rd.category == OpportunityCategory.CREDIT
        assert rd.estimated_savings == 1250000
        assert rd.roi == 150.0
        assert rd.applicable_regimes == [TaxRegime.REAL]

    def test_innovation_industry(self):
        """Test innovation keyword also matches."""
        opportunities = detect_deductions(
            FinancialInput(gross_revenue=0),
            CompanyContext(industry="INOVAÇÃO"),
        )
        assert opportunities[-1].title == "Research & Development Tax Credit"

    def test_keyword_is_case_sensitive(self):
        """Test lower-case industry tags do not match."""
        opportunities = detect_deductions(
            FinancialInput(gross_revenue=0),
            CompanyContext(industry="tecnologia"),
        )
        assert len(opportunities) == 1

    def test_no_company_context(self):
        """Test missing company context skips the R&D check."""
        analyzer = DeductionAnalyzer(FinancialInput(gross_revenue=0, expenses=10000000))
        assert len(analyzer.analyze()) == 2

    def test_negative_roi_when_cost_exceeds_savings(self):
        """Test ROI may be negative."""
        opportunities = detect_deductions(
            FinancialInput(gross_revenue=0, expenses=30000000),
            CompanyContext(industry="TECNOLOGIA"),
        )
        rd = opportunities[-1]

        assert rd.estimated_savings == 375000
        assert rd.roi == -25.0
