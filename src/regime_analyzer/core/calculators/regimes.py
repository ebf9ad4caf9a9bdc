"""Annual tax liability for each Brazilian corporate tax regime.

- Simples Nacional: unified rate over gross revenue
- Lucro Presumido: IRPJ + CSLL over a presumed profit margin
- Lucro Real: IRPJ + CSLL over actual profit, less tax credits
"""

import logging
from decimal import Decimal

from regime_analyzer.core.models.enums import TaxRegime
from regime_analyzer.core.models.financial import FinancialInput
from regime_analyzer.core.models.regime import RegimeResult
from regime_analyzer.core.rules.tax_constants import (
    CSLL_ADDITIONAL_RATE,
    CSLL_RATE,
    FEDERAL_BASE_RATE,
    IRPJ_ADDITIONAL_RATE,
    IRPJ_RATE,
    MONTHLY_PROFIT_THRESHOLD,
    MONTHS_PER_YEAR,
    PRESUMED_ADVANTAGES,
    PRESUMED_DISADVANTAGES,
    REAL_ADVANTAGES,
    REAL_DISADVANTAGES,
    SIMPLES_ADVANTAGES,
    SIMPLES_DISADVANTAGES,
    arredondar,
    obter_aliquota_simples,
    obter_margem_presumida,
)

logger = logging.getLogger(__name__)


def _monthly(valor: int) -> int:
    """Average monthly share of an annual amount."""
    return arredondar(Decimal(valor) / MONTHS_PER_YEAR)


def _federal_tax(lucro: int) -> int:
    """IRPJ + CSLL over an annual profit.

    Each tax has a base rate over the whole profit plus an additional rate
    over the monthly profit exceeding MONTHLY_PROFIT_THRESHOLD.
    """
    excesso = max(0, _monthly(lucro) - MONTHLY_PROFIT_THRESHOLD)
    excesso_anual = Decimal(excesso * MONTHS_PER_YEAR)

    irpj = arredondar(lucro * IRPJ_RATE + excesso_anual * IRPJ_ADDITIONAL_RATE)
    csll = arredondar(lucro * CSLL_RATE + excesso_anual * CSLL_ADDITIONAL_RATE)

    return irpj + csll


def calculate_simplified(financials: FinancialInput) -> RegimeResult:
    """Calculate Simples Nacional tax liability.

    Revenue based: expenses, deductions and credits do not change the result.

    Args:
        financials: Company annual figures

    Returns:
        RegimeResult for SIMPLES_NACIONAL
    """
    aliquota = obter_aliquota_simples(financials.sector)
    imposto = arredondar(financials.gross_revenue * aliquota)

    return RegimeResult(
        regime=TaxRegime.SIMPLIFIED,
        effective_tax_rate=float(aliquota),
        annual_tax_liability=imposto,
        average_monthly_payment=_monthly(imposto),
        advantages=list(SIMPLES_ADVANTAGES),
        disadvantages=list(SIMPLES_DISADVANTAGES),
    )


def calculate_presumed(financials: FinancialInput) -> RegimeResult:
    """Calculate Lucro Presumido tax liability.

    Profit is presumed as a fixed margin of gross revenue, by sector.

    Args:
        financials: Company annual figures

    Returns:
        RegimeResult for LUCRO_PRESUMIDO
    """
    margem = obter_margem_presumida(financials.sector)
    lucro_presumido = arredondar(financials.gross_revenue * margem)
    imposto = _federal_tax(lucro_presumido)

    return RegimeResult(
        regime=TaxRegime.PRESUMED,
        effective_tax_rate=float(FEDERAL_BASE_RATE),
        annual_tax_liability=imposto,
        average_monthly_payment=_monthly(imposto),
        advantages=list(PRESUMED_ADVANTAGES),
        disadvantages=list(PRESUMED_DISADVANTAGES),
    )


def calculate_real(financials: FinancialInput) -> RegimeResult:
    """Calculate Lucro Real tax liability.

    Actual profit is revenue minus expenses and deductions, never negative.
    Tax credits reduce the annual liability (floored at zero). Payments
    already made only reduce the remaining monthly installments; the annual
    liability is reported before them.

    Args:
        financials: Company annual figures

    Returns:
        RegimeResult for LUCRO_REAL
    """
    lucro_real = max(
        0, financials.gross_revenue - financials.expenses - financials.deductions
    )
    imposto = max(0, _federal_tax(lucro_real) - financials.tax_credits)
    saldo_restante = max(0, imposto - financials.previous_payments)

    if lucro_real == 0:
        logger.debug("Lucro real zerado: despesas e deduções cobrem a receita")

    return RegimeResult(
        regime=TaxRegime.REAL,
        effective_tax_rate=float(FEDERAL_BASE_RATE),
        annual_tax_liability=imposto,
        average_monthly_payment=_monthly(saldo_restante),
        advantages=list(REAL_ADVANTAGES),
        disadvantages=list(REAL_DISADVANTAGES),
    )
