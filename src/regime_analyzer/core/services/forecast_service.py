"""Month-by-month tax projection on top of the regime comparison."""

import logging
from decimal import Decimal
from typing import Optional, Sequence

from regime_analyzer.core.calculators.comparison import compare_regimes
from regime_analyzer.core.models.enums import Sector, TaxRegime
from regime_analyzer.core.models.financial import FinancialInput
from regime_analyzer.core.models.forecast import (
    ALL_REGIMES,
    ForecastParameters,
    ForecastSummary,
    MonthlyForecast,
    RegimeForecast,
    TaxForecast,
)
from regime_analyzer.core.models.regime import RegimeComparison
from regime_analyzer.core.rules.tax_constants import MONTHS_PER_YEAR, arredondar

logger = logging.getLogger(__name__)


class RegimeForecaster:
    """Projects revenue and expenses forward and re-runs the comparison.

    Revenue is a monthly figure (given, or gross revenue / 12) scaled by the
    seasonality factor; expenses grow by ``expense_growth``. Deductions and
    tax credits are carried over unchanged and previous payments are reset,
    since the projected year has not started.
    """

    def __init__(self, financials: FinancialInput, parameters: ForecastParameters):
        self.financials = financials
        self.parameters = parameters

    def forecast(self) -> TaxForecast:
        """Build the projection."""
        receita_mensal = self._monthly_revenue()
        receita_anual = receita_mensal * MONTHS_PER_YEAR
        despesas = arredondar(
            self.financials.expenses * (1 + Decimal(str(self.parameters.expense_growth)))
        )

        projetado = FinancialInput(
            gross_revenue=receita_anual,
            expenses=despesas,
            deductions=self.financials.deductions,
            tax_credits=self.financials.tax_credits,
            previous_payments=0,
            sector=self.financials.sector or Sector.SERVICO.value,
        )
        # Inputs are identical for every month, so one comparison serves them all
        comparison = compare_regimes(projetado)
        por_regime = self._regime_forecasts(comparison, receita_anual, despesas)

        meses = [
            MonthlyForecast(
                month=mes,
                projected_revenue=receita_mensal,
                projected_expenses=_per_month(despesas),
                regime_forecasts=por_regime,
                recommended_regime=comparison.recommended_regime,
            )
            for mes in range(1, self.parameters.months + 1)
        ]

        logger.debug(
            "Projeção de %d meses: receita anual %d, regime %s",
            self.parameters.months,
            receita_anual,
            comparison.recommended_regime.value,
        )

        return TaxForecast(
            parameters=self.parameters,
            monthly_forecasts=meses,
            annual_summary=ForecastSummary(
                total_projected_revenue=receita_anual,
                total_projected_expenses=despesas,
                projected_profit=receita_anual - despesas,
            ),
        )

    def _monthly_revenue(self) -> int:
        """Monthly revenue adjusted by seasonality."""
        if self.parameters.monthly_revenue is not None:
            base = Decimal(self.parameters.monthly_revenue)
        else:
            base = Decimal(self.financials.gross_revenue) / MONTHS_PER_YEAR

        return arredondar(base * Decimal(str(self.parameters.seasonality)))

    def _regime_forecasts(
        self, comparison: RegimeComparison, receita_anual: int, despesas: int
    ) -> list[RegimeForecast]:
        if receita_anual > 0:
            margem = (receita_anual - despesas) / receita_anual * 100
        else:
            margem = 0.0

        resultados = comparison.results
        return [
            RegimeForecast(
                regime=regime,
                estimated_tax=resultados[regime].annual_tax_liability,
                estimated_monthly_payment=_per_month(resultados[regime].annual_tax_liability),
                profit_margin=margem,
            )
            for regime in self.parameters.regimes
        ]


def _per_month(valor: int) -> int:
    return arredondar(Decimal(valor) / MONTHS_PER_YEAR)


def forecast_regimes(
    financials: FinancialInput,
    months: int,
    seasonality: float = 1.0,
    expense_growth: float = 0.0,
    regimes: Sequence[TaxRegime] = ALL_REGIMES,
    monthly_revenue: Optional[int] = None,
) -> TaxForecast:
    """Convenience function to project taxes for the coming months.

    Args:
        financials: Base year figures
        months: Number of months to project (1-12)
        seasonality: Revenue multiplier (0.5-2.0)
        expense_growth: Expense growth ratio (0-0.5, e.g. 0.1 for +10%)
        regimes: Regimes to include in each month, in the given order
        monthly_revenue: Projected monthly revenue in centavos; defaults to
            gross revenue / 12

    Returns:
        TaxForecast with one entry per month and the annual summary

    Raises:
        pydantic.ValidationError: if a parameter is out of range
    """
    parameters = ForecastParameters(
        months=months,
        seasonality=seasonality,
        expense_growth=expense_growth,
        regimes=list(regimes),
        monthly_revenue=monthly_revenue,
    )
    forecaster = RegimeForecaster(financials, parameters)
    return forecaster.forecast()
