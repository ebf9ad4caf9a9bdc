"""Value formatters for display and parsers for user-typed amounts."""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from regime_analyzer.shared.exceptions import InvalidAmountError

CENTAVOS = Decimal("100")

# Two or more thousands groups without decimals, e.g. "2.500.000"
THOUSANDS_ONLY = re.compile(r"\d{1,3}(\.\d{3}){2,}")


def format_currency(value: Decimal, symbol: str = "R$") -> str:
    """
    Format decimal as Brazilian currency.

    Args:
        value: Decimal value in reais
        symbol: Currency symbol (default: R$)

    Returns:
        Formatted string like "R$ 1.234,56"
    """
    negative = value < 0
    value = abs(value)

    formatted = f"{value:,.2f}"

    # Convert to Brazilian format (. for thousands, , for decimals)
    formatted = formatted.replace(",", "X").replace(".", ",").replace("X", ".")

    result = f"{symbol} {formatted}"
    return f"-{result}" if negative else result


def format_cents(centavos: int, symbol: str = "R$") -> str:
    """Format an amount in centavos as Brazilian currency."""
    return format_currency(Decimal(centavos) / CENTAVOS, symbol)


def format_percentage(value: float, decimals: int = 1) -> str:
    """
    Format a percentage value.

    Args:
        value: Percentage (e.g., 15.5 for 15.5%)
        decimals: Number of decimal places

    Returns:
        Formatted string like "15,5%"
    """
    formatted = f"{value:.{decimals}f}".replace(".", ",")
    return f"{formatted}%"


def parse_reais(text: str) -> int:
    """
    Parse an amount typed in reais into centavos.

    Accepts "1.234,56", "R$ 1.234,56", "1234,56", "1234.56", "2.500.000"
    and plain integers. With a single dot and no comma the dot is a decimal
    point: "1.234" is R$ 1,23. Fractional centavos round half-up.

    Raises:
        InvalidAmountError: if the text is not a non-negative amount
    """
    cleaned = re.sub(r"[R$\s]", "", text)

    if "," in cleaned or THOUSANDS_ONLY.fullmatch(cleaned):
        # Brazilian notation: dots group thousands, comma marks decimals
        cleaned = cleaned.replace(".", "").replace(",", ".")

    try:
        valor = Decimal(cleaned)
    except InvalidOperation:
        raise InvalidAmountError(f"Valor inválido: {text!r}") from None

    if not valor.is_finite() or valor < 0:
        raise InvalidAmountError(f"Valor deve ser positivo: {text!r}")

    return int((valor * CENTAVOS).to_integral_value(rounding=ROUND_HALF_UP))
