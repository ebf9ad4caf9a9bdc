"""Enumerations for tax regime domain models."""

from enum import Enum


class TaxRegime(str, Enum):
    """Brazilian corporate tax regimes, in evaluation order."""

    SIMPLIFIED = "SIMPLES_NACIONAL"
    PRESUMED = "LUCRO_PRESUMIDO"
    REAL = "LUCRO_REAL"

    @property
    def label(self) -> str:
        """Display label (e.g. 'LUCRO PRESUMIDO')."""
        return self.value.replace("_", " ")


class Sector(str, Enum):
    """Activity sectors known to the rate tables."""

    COMERCIO = "COMÉRCIO"
    INDUSTRIA = "INDÚSTRIA"
    SERVICO = "SERVIÇO"
    TRANSPORTES = "TRANSPORTES"
    INTERMEDIACAO = "INTERMEDIAÇÃO"


class OpportunityCategory(str, Enum):
    """Opportunity categories."""

    DEDUCTION = "DEDUCTION"
    CREDIT = "CREDIT"
    TIMING = "TIMING"
    EXPENSE_OPTIMIZATION = "EXPENSE_OPTIMIZATION"


class RiskLevel(str, Enum):
    """Risk of implementing an opportunity."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class ImplementationEffort(str, Enum):
    """Effort needed to implement an opportunity."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
