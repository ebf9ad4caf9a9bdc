"""Input models: company financials and company context."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from regime_analyzer.shared.validators import normalize_uf


class FinancialInput(BaseModel):
    """Annual financial figures of a company.

    All amounts are in centavos.
    """

    gross_revenue: int = Field(..., ge=0, description="Receita bruta anual")
    expenses: int = Field(default=0, ge=0, description="Despesas operacionais")
    deductions: int = Field(default=0, ge=0, description="Deduções")
    tax_credits: int = Field(default=0, ge=0, description="Créditos tributários")
    previous_payments: int = Field(
        default=0, ge=0, description="Pagamentos já efetuados no ano"
    )
    sector: Optional[str] = Field(default=None, description="Setor de atividade")

    model_config = {"frozen": True}


class CompanyContext(BaseModel):
    """Read-only company facts used by opportunity detection."""

    name: Optional[str] = Field(default=None, description="Razão social")
    industry: Optional[str] = Field(default=None, description="Ramo de atividade")
    state: Optional[str] = Field(default=None, description="UF de registro")
    description: Optional[str] = Field(default=None, description="Descrição livre")

    @field_validator("state")
    @classmethod
    def normalize_state(cls, v: Optional[str]) -> Optional[str]:
        """Strip and upper-case the UF code."""
        if v is None:
            return None
        return normalize_uf(v)

    model_config = {"frozen": True}
