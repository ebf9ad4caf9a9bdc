"""Main Typer application for Regime Analyzer."""

import json
from typing import Annotated, Optional

import pydantic
import typer
from rich.panel import Panel
from rich.table import Table

from regime_analyzer import __version__
from regime_analyzer.cli.console import (
    configure_logging,
    console,
    print_error,
    print_warning,
)
from regime_analyzer.core.calculators import compare_regimes
from regime_analyzer.core.models import (
    CompanyContext,
    FinancialInput,
    OpportunityCategory,
    OpportunityFilter,
    RiskLevel,
    TaxRegime,
)
from regime_analyzer.core.models.forecast import ALL_REGIMES
from regime_analyzer.core.services import forecast_regimes, get_opportunities
from regime_analyzer.shared.exceptions import InvalidStateCodeError, RegimeAnalyzerError
from regime_analyzer.shared.formatters import format_cents, format_percentage, parse_reais
from regime_analyzer.shared.validators import validar_uf

app = typer.Typer(
    name="regime-analyzer",
    help="Comparação de regimes tributários e oportunidades fiscais para PJ",
    add_completion=True,
    no_args_is_help=True,
)

ReceitaOption = Annotated[
    str,
    typer.Option(
        "--receita", "-r", help="Receita bruta anual em R$ (ex: 2.500.000,00 ou 2500000)"
    ),
]
DespesasOption = Annotated[str, typer.Option("--despesas", "-d", help="Despesas anuais em R$")]
DeducoesOption = Annotated[str, typer.Option("--deducoes", help="Deduções anuais em R$")]
CreditosOption = Annotated[str, typer.Option("--creditos", help="Créditos tributários em R$")]
PagamentosOption = Annotated[
    str, typer.Option("--pagamentos", help="Pagamentos já efetuados no ano em R$")
]
SetorOption = Annotated[
    Optional[str],
    typer.Option("--setor", "-s", help="Setor: COMÉRCIO, INDÚSTRIA, SERVIÇO, TRANSPORTES, INTERMEDIAÇÃO"),
]
OutputOption = Annotated[
    str, typer.Option("--output", "-o", help="Formato de saída: table, json, plain")
]

RISK_STYLES = {
    RiskLevel.LOW: "[risk_low]BAIXO[/risk_low]",
    RiskLevel.MEDIUM: "[risk_medium]MÉDIO[/risk_medium]",
    RiskLevel.HIGH: "[risk_high]ALTO[/risk_high]",
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Regime Analyzer v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Mostra a versão e sai",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Exibe logs de depuração"),
    ] = False,
) -> None:
    """Regime Analyzer - Simples Nacional x Lucro Presumido x Lucro Real."""
    configure_logging(verbose)


def _build_financials(
    receita: str,
    despesas: str,
    deducoes: str,
    creditos: str,
    pagamentos: str,
    setor: Optional[str],
) -> FinancialInput:
    """Parse CLI amounts (in reais) into a FinancialInput (centavos)."""
    return FinancialInput(
        gross_revenue=parse_reais(receita),
        expenses=parse_reais(despesas),
        deductions=parse_reais(deducoes),
        tax_credits=parse_reais(creditos),
        previous_payments=parse_reais(pagamentos),
        sector=setor,
    )


@app.command()
def compare(
    receita: ReceitaOption,
    despesas: DespesasOption = "0",
    deducoes: DeducoesOption = "0",
    creditos: CreditosOption = "0",
    pagamentos: PagamentosOption = "0",
    setor: SetorOption = None,
    output: OutputOption = "table",
) -> None:
    """Compara os três regimes e recomenda o de menor imposto."""
    try:
        financials = _build_financials(receita, despesas, deducoes, creditos, pagamentos, setor)
        comparison = compare_regimes(financials)
    except (RegimeAnalyzerError, pydantic.ValidationError) as e:
        print_error(str(e))
        raise typer.Exit(1)

    if output == "json":
        print(json.dumps(comparison.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return

    if output == "plain":
        print(comparison.analysis_details)
        return

    console.print()
    console.print(
        Panel.fit(
            f"[header]Receita Bruta Anual:[/header] {format_cents(financials.gross_revenue)}\n"
            f"[header]Setor:[/header] {financials.sector or 'não informado (padrão: SERVIÇO)'}",
            title="Regime Analyzer - Comparação",
            border_style="blue",
        )
    )

    table = Table(show_header=True, header_style="bold")
    table.add_column("Regime", style="cyan")
    table.add_column("Alíquota", justify="right")
    table.add_column("Imposto Anual", justify="right")
    table.add_column("Parcela Mensal", justify="right")

    for regime, result in comparison.results.items():
        nome = regime.label
        if regime == comparison.recommended_regime:
            nome = f"[recommended]{nome} ✔[/recommended]"
        table.add_row(
            nome,
            format_percentage(result.effective_tax_rate * 100, decimals=2),
            format_cents(result.annual_tax_liability),
            format_cents(result.average_monthly_payment),
        )

    console.print()
    console.print(table)

    console.print()
    console.print(
        Panel.fit(
            f"[header]Regime recomendado:[/header] [recommended]{comparison.recommended_regime.label}[/recommended]\n"
            f"[header]Economia anual vs Simples Nacional:[/header] "
            f"[currency]{format_cents(comparison.estimated_savings)}[/currency]",
            title="Recomendação",
            border_style="green",
        )
    )
    console.print("[muted]Análise informativa; não constitui consultoria fiscal.[/muted]")


@app.command()
def opportunities(
    receita: ReceitaOption,
    despesas: DespesasOption = "0",
    deducoes: DeducoesOption = "0",
    creditos: CreditosOption = "0",
    pagamentos: PagamentosOption = "0",
    setor: SetorOption = None,
    industria: Annotated[
        Optional[str], typer.Option("--industria", "-i", help="Ramo de atividade (ex: TECNOLOGIA)")
    ] = None,
    uf: Annotated[Optional[str], typer.Option("--uf", help="UF de registro (ex: BA)")] = None,
    descricao: Annotated[
        Optional[str], typer.Option("--descricao", help="Descrição livre da empresa")
    ] = None,
    categoria: Annotated[
        Optional[OpportunityCategory],
        typer.Option("--categoria", "-c", help="Filtra por categoria", case_sensitive=False),
    ] = None,
    risco: Annotated[
        Optional[RiskLevel],
        typer.Option("--risco", help="Filtra por nível de risco", case_sensitive=False),
    ] = None,
    roi_minimo: Annotated[
        Optional[float], typer.Option("--roi-minimo", help="ROI mínimo em %")
    ] = None,
    output: OutputOption = "table",
) -> None:
    """Lista oportunidades de economia fiscal ordenadas por prioridade."""
    try:
        if uf:
            valida, motivo = validar_uf(uf)
            if not valida:
                raise InvalidStateCodeError(motivo)

        financials = _build_financials(receita, despesas, deducoes, creditos, pagamentos, setor)
        company = CompanyContext(industry=industria, state=uf, description=descricao)
        filters = OpportunityFilter(category=categoria, risk_level=risco, min_roi=roi_minimo)
        result = get_opportunities(financials, company, filters)
    except (RegimeAnalyzerError, pydantic.ValidationError) as e:
        print_error(str(e))
        raise typer.Exit(1)

    if output == "json":
        print(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return

    if not result.opportunities:
        print_warning("Nenhuma oportunidade encontrada com os filtros informados.")
        return

    if output == "plain":
        for opp in result.opportunities:
            print(
                f"[{opp.priority:>2}] {opp.title} - {format_cents(opp.estimated_savings)} "
                f"(líquido {format_cents(opp.net_benefit)}, "
                f"ROI {format_percentage(opp.roi)}, {opp.timeline})"
            )
        return

    table = Table(show_header=True, header_style="bold", title="Oportunidades Fiscais")
    table.add_column("Prioridade", justify="center")
    table.add_column("Categoria", style="cyan")
    table.add_column("Oportunidade", max_width=40)
    table.add_column("Economia", justify="right", style="currency")
    table.add_column("Custo", justify="right")
    table.add_column("Benefício Líquido", justify="right")
    table.add_column("ROI", justify="right")
    table.add_column("Risco", justify="center")
    table.add_column("Prazo")

    for opp in result.opportunities:
        table.add_row(
            str(opp.priority),
            opp.category.value,
            opp.title,
            format_cents(opp.estimated_savings),
            format_cents(opp.implementation_cost),
            format_cents(opp.net_benefit),
            format_percentage(opp.roi),
            RISK_STYLES.get(opp.risk_level, opp.risk_level.value),
            opp.timeline,
        )

    console.print()
    console.print(table)

    resumo = result.summary
    console.print()
    console.print(
        Panel.fit(
            f"[header]Oportunidades:[/header] {resumo.total_opportunities}\n"
            f"[header]Economia potencial anual:[/header] "
            f"[currency]{format_cents(resumo.potential_annual_savings)}[/currency]\n"
            f"[header]Alta prioridade (≥ 7):[/header] {resumo.high_priority_count}\n"
            f"[header]Implementáveis imediatamente:[/header] {resumo.implementable_now}",
            title="Resumo",
            border_style="cyan",
        )
    )


@app.command()
def forecast(
    receita: ReceitaOption,
    despesas: DespesasOption = "0",
    deducoes: DeducoesOption = "0",
    creditos: CreditosOption = "0",
    setor: SetorOption = None,
    meses: Annotated[int, typer.Option("--meses", "-m", help="Meses projetados (1-12)")] = 12,
    receita_mensal: Annotated[
        Optional[str],
        typer.Option("--receita-mensal", help="Receita mensal projetada em R$ (padrão: receita / 12)"),
    ] = None,
    sazonalidade: Annotated[
        float, typer.Option("--sazonalidade", help="Fator sazonal da receita (0.5-2.0)")
    ] = 1.0,
    crescimento: Annotated[
        float,
        typer.Option("--crescimento-despesas", help="Crescimento das despesas (0-0.5, ex: 0.1)"),
    ] = 0.0,
    regimes: Annotated[
        Optional[list[TaxRegime]],
        typer.Option("--regime", help="Regime a projetar (repetível)", case_sensitive=False),
    ] = None,
    output: OutputOption = "table",
) -> None:
    """Projeta imposto e parcelas mensais para os próximos meses."""
    try:
        financials = _build_financials(receita, despesas, deducoes, creditos, "0", setor)
        projecao = forecast_regimes(
            financials,
            months=meses,
            seasonality=sazonalidade,
            expense_growth=crescimento,
            regimes=regimes or ALL_REGIMES,
            monthly_revenue=parse_reais(receita_mensal) if receita_mensal else None,
        )
    except (RegimeAnalyzerError, pydantic.ValidationError) as e:
        print_error(str(e))
        raise typer.Exit(1)

    if output == "json":
        print(json.dumps(projecao.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return

    if output == "plain":
        for mes in projecao.monthly_forecasts:
            parcelas = ", ".join(
                f"{f.regime.label}: {format_cents(f.estimated_monthly_payment)}"
                for f in mes.regime_forecasts
            )
            print(f"Mês {mes.month:>2}: receita {format_cents(mes.projected_revenue)} | {parcelas}")
        return

    table = Table(show_header=True, header_style="bold", title="Projeção Mensal")
    table.add_column("Mês", justify="center")
    table.add_column("Receita", justify="right", style="currency")
    table.add_column("Despesas", justify="right")
    for regime in projecao.parameters.regimes:
        table.add_column(f"Parcela {regime.label}", justify="right")
    table.add_column("Recomendado", style="recommended")

    for mes in projecao.monthly_forecasts:
        table.add_row(
            str(mes.month),
            format_cents(mes.projected_revenue),
            format_cents(mes.projected_expenses),
            *(format_cents(f.estimated_monthly_payment) for f in mes.regime_forecasts),
            mes.recommended_regime.label,
        )

    console.print()
    console.print(table)

    resumo = projecao.annual_summary
    console.print()
    console.print(
        Panel.fit(
            f"[header]Receita anual projetada:[/header] "
            f"[currency]{format_cents(resumo.total_projected_revenue)}[/currency]\n"
            f"[header]Despesas anuais projetadas:[/header] "
            f"{format_cents(resumo.total_projected_expenses)}\n"
            f"[header]Lucro projetado:[/header] {format_cents(resumo.projected_profit)}",
            title="Resumo Anual",
            border_style="cyan",
        )
    )


if __name__ == "__main__":
    app()
