"""Tax forecast models."""

from typing import Optional

from pydantic import BaseModel, Field

from regime_analyzer.core.models.enums import TaxRegime

ALL_REGIMES = (TaxRegime.SIMPLIFIED, TaxRegime.PRESUMED, TaxRegime.REAL)


class ForecastParameters(BaseModel):
    """Projection knobs, validated before any calculation."""

    months: int = Field(..., ge=1, le=12, description="Meses projetados")
    seasonality: float = Field(default=1.0, ge=0.5, le=2.0, description="Fator sazonal")
    expense_growth: float = Field(
        default=0.0, ge=0.0, le=0.5, description="Crescimento esperado das despesas"
    )
    regimes: list[TaxRegime] = Field(default_factory=lambda: list(ALL_REGIMES), min_length=1)
    monthly_revenue: Optional[int] = Field(
        default=None, ge=0, description="Receita mensal projetada (centavos)"
    )

    model_config = {"frozen": True}


class RegimeForecast(BaseModel):
    """Projected tax for one regime."""

    regime: TaxRegime
    estimated_tax: int = Field(..., ge=0, description="Imposto anual projetado (centavos)")
    estimated_monthly_payment: int = Field(..., ge=0, description="Centavos")
    profit_margin: float = Field(..., description="Margem de lucro (%)")

    model_config = {"frozen": True}


class MonthlyForecast(BaseModel):
    """Projection for a single month."""

    month: int = Field(..., ge=1, le=12)
    projected_revenue: int = Field(..., ge=0, description="Centavos")
    projected_expenses: int = Field(..., ge=0, description="Centavos")
    regime_forecasts: list[RegimeForecast] = Field(default_factory=list)
    recommended_regime: TaxRegime

    model_config = {"frozen": True}


class ForecastSummary(BaseModel):
    """Annualized figures behind the projection."""

    total_projected_revenue: int = Field(default=0, ge=0)
    total_projected_expenses: int = Field(default=0, ge=0)
    projected_profit: int = Field(default=0, description="May be negative")


class TaxForecast(BaseModel):
    """Month-by-month projection plus annual summary."""

    parameters: ForecastParameters
    monthly_forecasts: list[MonthlyForecast] = Field(default_factory=list)
    annual_summary: ForecastSummary = Field(default_factory=ForecastSummary)
