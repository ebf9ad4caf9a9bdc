"""Regime calculation and comparison result models."""

from pydantic import BaseModel, Field

from regime_analyzer.core.models.enums import TaxRegime


class RegimeResult(BaseModel):
    """Tax liability estimate for one regime."""

    regime: TaxRegime = Field(..., description="Regime this result belongs to")
    effective_tax_rate: float = Field(..., ge=0, description="Alíquota (0.088 = 8,8%)")
    annual_tax_liability: int = Field(..., ge=0, description="Imposto anual (centavos)")
    average_monthly_payment: int = Field(
        ..., ge=0, description="Parcela mensal média (centavos)"
    )
    advantages: list[str] = Field(default_factory=list)
    disadvantages: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    def to_storage(self) -> dict:
        """Serialize to the JSON shape persisted by callers."""
        return {
            "taxRate": self.effective_tax_rate,
            "taxLiability": self.annual_tax_liability,
            "monthlyPayment": self.average_monthly_payment,
            "advantages": list(self.advantages),
            "disadvantages": list(self.disadvantages),
        }


class RegimeComparison(BaseModel):
    """Side-by-side result of the three regimes and the recommendation."""

    simplified: RegimeResult = Field(..., description="Simples Nacional")
    presumed: RegimeResult = Field(..., description="Lucro Presumido")
    real: RegimeResult = Field(..., description="Lucro Real")
    recommended_regime: TaxRegime = Field(..., description="Regime de menor imposto")
    estimated_savings: int = Field(
        ..., ge=0, description="Economia anual vs Simples Nacional (centavos)"
    )
    analysis_details: str = Field(default="", description="Relatório textual")

    model_config = {"frozen": True}

    @property
    def results(self) -> dict[TaxRegime, RegimeResult]:
        """Results keyed by regime, in evaluation order."""
        return {
            TaxRegime.SIMPLIFIED: self.simplified,
            TaxRegime.PRESUMED: self.presumed,
            TaxRegime.REAL: self.real,
        }

    @property
    def recommended_result(self) -> RegimeResult:
        """Result of the recommended regime."""
        return self.results[self.recommended_regime]
