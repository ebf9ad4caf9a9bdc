"""Regime comparison and recommendation."""

import logging
from decimal import Decimal

from regime_analyzer.core.calculators.regimes import (
    calculate_presumed,
    calculate_real,
    calculate_simplified,
)
from regime_analyzer.core.models.enums import TaxRegime
from regime_analyzer.core.models.financial import FinancialInput
from regime_analyzer.core.models.regime import RegimeComparison, RegimeResult
from regime_analyzer.shared.formatters import format_cents

logger = logging.getLogger(__name__)

DISCLAIMER = (
    "Esta análise é informativa e não constitui consultoria fiscal",
    "Consulte um contador para decisão definitiva",
    "Considere fatores não-fiscais na decisão",
)


class RegimeComparator:
    """Runs the three regime calculators and picks the cheapest.

    Selection starts from Simples Nacional and only switches to a later
    regime (Presumido, then Real) when its liability is strictly lower, so
    exact ties go to the regime evaluated first.
    """

    def __init__(self, financials: FinancialInput):
        self.financials = financials

    def compare(self) -> RegimeComparison:
        """Build the full comparison."""
        simples = calculate_simplified(self.financials)
        presumido = calculate_presumed(self.financials)
        real = calculate_real(self.financials)

        recomendado = TaxRegime.SIMPLIFIED
        menor_imposto = simples.annual_tax_liability

        if presumido.annual_tax_liability < menor_imposto:
            recomendado = TaxRegime.PRESUMED
            menor_imposto = presumido.annual_tax_liability

        if real.annual_tax_liability < menor_imposto:
            recomendado = TaxRegime.REAL
            menor_imposto = real.annual_tax_liability

        # Simples Nacional is assumed to be the current regime
        economia = max(0, simples.annual_tax_liability - menor_imposto)

        logger.debug(
            "Regime recomendado: %s (economia de %d centavos)",
            recomendado.value,
            economia,
        )

        return RegimeComparison(
            simplified=simples,
            presumed=presumido,
            real=real,
            recommended_regime=recomendado,
            estimated_savings=economia,
            analysis_details=self._build_analysis(
                simples, presumido, real, recomendado, economia
            ),
        )

    def _build_analysis(
        self,
        simples: RegimeResult,
        presumido: RegimeResult,
        real: RegimeResult,
        recomendado: TaxRegime,
        economia: int,
    ) -> str:
        """Render the comparison as a multi-section text report."""
        lines = [
            "ANÁLISE COMPARATIVA DE REGIMES FISCAIS",
            "====================================",
            "",
            f"Receita Bruta Anual: {format_cents(self.financials.gross_revenue)}",
            "",
        ]
        lines += self._regime_section("SIMPLES NACIONAL", "Alíquota", simples)
        lines += self._regime_section("LUCRO PRESUMIDO", "Alíquota Federal", presumido)
        lines += self._regime_section("LUCRO REAL", "Alíquota Federal", real)
        lines += [
            "RECOMENDAÇÃO:",
            f"  - Regime Recomendado: {recomendado.value}",
            f"  - Economia Anual: R$ {_reais(economia)} vs Simples Nacional",
            "",
            "IMPORTANTE:",
        ]
        lines += [f"  - {aviso}" for aviso in DISCLAIMER]

        return "\n".join(lines)

    @staticmethod
    def _regime_section(titulo: str, rotulo_aliquota: str, result: RegimeResult) -> list[str]:
        return [
            f"{titulo}:",
            f"  - {rotulo_aliquota}: {result.effective_tax_rate * 100:.2f}%",
            f"  - Imposto Anual: R$ {_reais(result.annual_tax_liability)}",
            f"  - Parcela Mensal: R$ {_reais(result.average_monthly_payment)}",
            "",
        ]


def _reais(centavos: int) -> str:
    """Centavos as a plain two-decimal reais figure (e.g. '220000.00')."""
    return f"{Decimal(centavos) / 100:.2f}"


def compare_regimes(financials: FinancialInput) -> RegimeComparison:
    """Convenience function to compare the three regimes.

    Args:
        financials: Company annual figures

    Returns:
        RegimeComparison with the recommended regime and savings
    """
    comparator = RegimeComparator(financials)
    return comparator.compare()
