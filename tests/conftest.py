"""Pytest configuration and fixtures."""

import pytest

from regime_analyzer.core.models import CompanyContext, FinancialInput, Sector


@pytest.fixture
def services_company() -> FinancialInput:
    """R$ 2.5M services company with no expenses (Simples is cheapest)."""
    return FinancialInput(gross_revenue=250000000, sector=Sector.SERVICO)


@pytest.fixture
def commerce_company() -> FinancialInput:
    """R$ 3M commerce company (Presumido is cheapest)."""
    return FinancialInput(gross_revenue=300000000, sector=Sector.COMERCIO)


@pytest.fixture
def low_margin_services() -> FinancialInput:
    """Services company whose expenses eat almost all revenue (Real is cheapest)."""
    return FinancialInput(
        gross_revenue=250000000,
        expenses=240000000,
        sector=Sector.SERVICO,
    )


@pytest.fixture
def full_profile_financials() -> FinancialInput:
    """Figures that trigger every opportunity check."""
    return FinancialInput(
        gross_revenue=100000000,
        expenses=30000000,
        sector=Sector.SERVICO,
    )


@pytest.fixture
def full_profile_company() -> CompanyContext:
    """Northeast technology exporter."""
    return CompanyContext(
        name="Acme Tecnologia Ltda",
        industry="TECNOLOGIA",
        state="BA",
        description="Software house com clientes de exportação",
    )


@pytest.fixture
def plain_company() -> CompanyContext:
    """Company that matches no keyword or regional rule."""
    return CompanyContext(industry="VAREJO", state="SC", description="Loja de roupas")
