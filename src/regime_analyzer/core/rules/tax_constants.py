"""Tax constants, lookup tables and thresholds for regime analysis.

Simplified model of Brazilian federal corporate taxation (2024 values).
It is not a certified tax computation.

All monetary thresholds are in centavos. Rates are Decimal so that
``centavos * rate`` stays exact until the final rounding.
"""

from decimal import ROUND_FLOOR, Decimal
from types import MappingProxyType
from typing import Optional

DEFAULT_SECTOR = "DEFAULT"

# === Simples Nacional: unified rate by sector ===

SIMPLES_RATES = MappingProxyType(
    {
        "COMÉRCIO": Decimal("0.048"),  # 4.8%
        "INDÚSTRIA": Decimal("0.063"),  # 6.3%
        "SERVIÇO": Decimal("0.088"),  # 8.8%
        "TRANSPORTES": Decimal("0.042"),  # 4.2%
        "INTERMEDIAÇÃO": Decimal("0.062"),  # 6.2%
        DEFAULT_SECTOR: Decimal("0.088"),  # services rate
    }
)

# === Lucro Presumido: presumed profit margin by sector ===

PRESUMED_MARGINS = MappingProxyType(
    {
        "COMÉRCIO": Decimal("0.08"),
        "INDÚSTRIA": Decimal("0.12"),
        "SERVIÇO": Decimal("0.32"),
        "TRANSPORTES": Decimal("0.16"),
        "INTERMEDIAÇÃO": Decimal("0.16"),
        DEFAULT_SECTOR: Decimal("0.32"),  # services margin
    }
)

# === IRPJ / CSLL (Lucro Presumido and Lucro Real) ===

IRPJ_RATE = Decimal("0.15")
IRPJ_ADDITIONAL_RATE = Decimal("0.10")
CSLL_RATE = Decimal("0.09")
CSLL_ADDITIONAL_RATE = Decimal("0.20")

# Additional rates apply to monthly profit above this value
MONTHLY_PROFIT_THRESHOLD = 20000  # centavos

FEDERAL_BASE_RATE = IRPJ_RATE + CSLL_RATE  # 24%

MONTHS_PER_YEAR = 12

# === Fixed regime descriptions ===

SIMPLES_ADVANTAGES = (
    "Single unified tax (replaces IRPJ, CSLL, IPI, INSS)",
    "Simplified accounting",
    "Lower administrative burden",
    "Fixed monthly payments (DAS)",
    "Eligible companies with revenue < R$4.8M",
)
SIMPLES_DISADVANTAGES = (
    "Cannot recover VAT credit",
    "Higher effective rate for high-margin businesses",
    "Limited to certain sectors",
    "Cannot offset losses",
)

PRESUMED_ADVANTAGES = (
    "Moderate tax rate (34% federal)",
    "Simple calculation (fixed profit margin)",
    "Quarterly estimated payments",
    "No detailed accounting required",
    "Can be elected by any company",
)
PRESUMED_DISADVANTAGES = (
    "Presumed profit fixed regardless of actual profit",
    "Cannot recover VAT credit",
    "Fixed margins may not match reality",
    "More tax if actual profit is low",
    "Cannot offset previous losses",
)

REAL_ADVANTAGES = (
    "Lower rate if profit is low (34% federal)",
    "Can recover VAT credit",
    "Tax based on actual profit",
    "Can offset losses",
    "Can utilize tax credits",
    "Required for companies > R$78M revenue",
)
REAL_DISADVANTAGES = (
    "Requires detailed accounting",
    "More complex calculations",
    "Higher tax if profit is high",
    "Quarterly estimated payments required",
    "Annual reconciliation needed",
)

# === Opportunity detection ===

# Combined IRPJ + CSLL rate used to value timing and regional benefits
COMBINED_TAX_RATE = Decimal("0.34")

# Deductions
HOME_OFFICE_RATE = Decimal("0.07")
HOME_OFFICE_CAP = 1200000  # R$ 12k/year
DEPRECIATION_EXPENSE_THRESHOLD = 5000000  # R$ 50k
DEPRECIATION_RATE = Decimal("0.05")
DEPRECIATION_CAP = 5000000  # R$ 50k
DEPRECIATION_COST = 100000  # R$ 1k accounting
RD_INDUSTRY_KEYWORDS = ("TECNOLOG", "INOV")
RD_SPENDING_SHARE = Decimal("0.05")
RD_CREDIT_SHARE = Decimal("0.25")
RD_COST = 500000  # R$ 5k compliance

# Credits
NORTHEAST_STATES = frozenset({"BA", "SE", "PE", "AL", "PB", "RN", "CE", "PI", "MA"})
SUDENE_CREDIT_SHARE = Decimal("0.75")
SUDENE_COST = 3000000  # R$ 30k legal/tax advisory
EXPORT_KEYWORDS = ("export", "internacional")
EXPORT_REVENUE_SHARE = Decimal("0.10")
EXPORT_BENEFIT_SHARE = Decimal("0.25")
EXPORT_COST = 1000000  # R$ 10k

# Timing
REVENUE_DEFERRAL_THRESHOLD = 5000000  # R$ 50k
REVENUE_DEFERRAL_SHARE = Decimal("0.10")
EXPENSE_ACCELERATION_RATE = Decimal("0.15")
EXPENSE_ACCELERATION_CAP = 5000000  # R$ 50k

# Expense optimization: budget = share of expenses, gated on its threshold
PAYROLL_SHARE = Decimal("0.40")
PAYROLL_THRESHOLD = 10000000  # R$ 100k
CONTRACTOR_SAVINGS_RATE = Decimal("0.20")
CONTRACTOR_COST = 500000  # R$ 5k

EQUIPMENT_SHARE = Decimal("0.10")
EQUIPMENT_THRESHOLD = 2000000  # R$ 20k
LEASE_SAVINGS_RATE = Decimal("0.15")
LEASE_COST = 200000  # R$ 2k

SERVICES_SHARE = Decimal("0.20")
SERVICES_THRESHOLD = 5000000  # R$ 50k
OUTSOURCING_SAVINGS_RATE = Decimal("0.25")
OUTSOURCING_COST = 1000000  # R$ 10k

# === Priority scoring ===

BASE_PRIORITY_SCORE = Decimal("5")
ROI_BONUS_DIVISOR = Decimal("50")
ROI_BONUS_CAP = Decimal("3")
MIN_PRIORITY = 1
MAX_PRIORITY = 10
HIGH_PRIORITY = 7
ROI_FREE_IMPLEMENTATION = 100.0

EFFORT_PENALTY = MappingProxyType(
    {"LOW": Decimal("0"), "MEDIUM": Decimal("-1"), "HIGH": Decimal("-2")}
)
RISK_PENALTY = MappingProxyType(
    {"LOW": Decimal("0"), "MEDIUM": Decimal("-0.5"), "HIGH": Decimal("-1.5")}
)


def arredondar(valor: Decimal) -> int:
    """Round half-up to an integer (2.5 -> 3, -2.5 -> -2).

    Args:
        valor: Exact value to round

    Returns:
        Nearest integer, ties toward positive infinity
    """
    return int((valor + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR))


def _sector_key(sector: Optional[str]) -> str:
    """Normalize a sector string to a table key."""
    return sector.upper() if sector else DEFAULT_SECTOR


def obter_aliquota_simples(sector: Optional[str]) -> Decimal:
    """Get the Simples Nacional rate for a sector (DEFAULT if unknown)."""
    return SIMPLES_RATES.get(_sector_key(sector), SIMPLES_RATES[DEFAULT_SECTOR])


def obter_margem_presumida(sector: Optional[str]) -> Decimal:
    """Get the presumed profit margin for a sector (DEFAULT if unknown)."""
    return PRESUMED_MARGINS.get(_sector_key(sector), PRESUMED_MARGINS[DEFAULT_SECTOR])
