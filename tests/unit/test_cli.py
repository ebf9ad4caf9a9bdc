"""Tests for the command line interface."""

import json

from typer.testing import CliRunner

from regime_analyzer import __version__
from regime_analyzer.cli.app import app

runner = CliRunner()


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestCompareCommand:
    """Tests for the compare command."""

    def test_plain_report(self):
        """Test plain output prints the text report."""
        result = runner.invoke(
            app, ["compare", "--receita", "3.000.000,00", "--setor", "COMÉRCIO", "-o", "plain"]
        )

        assert result.exit_code == 0
        assert "SIMPLES NACIONAL:" in result.output
        assert "Regime Recomendado: LUCRO_PRESUMIDO" in result.output

    def test_json_output(self):
        """Test JSON output carries the comparison fields in centavos."""
        result = runner.invoke(app, ["compare", "-r", "2500000", "-s", "SERVIÇO", "-o", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["recommended_regime"] == "SIMPLES_NACIONAL"
        assert data["estimated_savings"] == 0
        assert data["simplified"]["annual_tax_liability"] == 22000000

    def test_lowercase_sector(self):
        """Test sector is case-insensitive."""
        result = runner.invoke(
            app, ["compare", "-r", "3000000", "-s", "comércio", "-o", "json"]
        )

        assert json.loads(result.output)["recommended_regime"] == "LUCRO_PRESUMIDO"

    def test_table_output(self):
        result = runner.invoke(app, ["compare", "-r", "2.500.000,00"])

        assert result.exit_code == 0
        assert "Recomendação" in result.output

    def test_invalid_amount(self):
        """Test unparseable amount exits with code 1."""
        result = runner.invoke(app, ["compare", "--receita", "abc"])

        assert result.exit_code == 1
        assert "Erro" in result.output

    def test_negative_amount(self):
        result = runner.invoke(app, ["compare", "--receita", "1000", "--despesas=-5"])
        assert result.exit_code == 1


class TestOpportunitiesCommand:
    """Tests for the opportunities command."""

    ARGS = [
        "opportunities",
        "-r", "1.000.000,00",
        "-d", "300.000,00",
        "-i", "TECNOLOGIA",
        "--uf", "ba",
        "--descricao", "clientes de exportação",
    ]

    def test_json_output(self):
        """Test ranked opportunities and summary."""
        result = runner.invoke(app, self.ARGS + ["-o", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["summary"]["total_opportunities"] == 10
        assert data["summary"]["high_priority_count"] == 6
        assert data["opportunities"][0]["title"] == "Home Office Deduction"
        assert data["opportunities"][-1]["priority"] == 2

    def test_category_filter(self):
        """Test category filter is case-insensitive."""
        result = runner.invoke(app, self.ARGS + ["-c", "credit", "-o", "json"])

        data = json.loads(result.output)
        assert [o["category"] for o in data["opportunities"]] == ["CREDIT"] * 3

    def test_plain_output(self):
        result = runner.invoke(app, self.ARGS + ["-o", "plain"])

        assert result.exit_code == 0
        assert "SUDENE Regional Development Credit" in result.output

    def test_table_output(self):
        result = runner.invoke(app, self.ARGS)

        assert result.exit_code == 0
        assert "Resumo" in result.output

    def test_no_results_warning(self):
        """Test filters that match nothing print a warning."""
        result = runner.invoke(app, self.ARGS + ["--roi-minimo", "100000"])

        assert result.exit_code == 0
        assert "Nenhuma oportunidade" in result.output

    def test_invalid_state(self):
        """Test unknown UF exits with code 1."""
        result = runner.invoke(app, ["opportunities", "-r", "1000", "--uf", "XX"])

        assert result.exit_code == 1
        assert "UF desconhecida" in result.output

    def test_net_benefit_shown(self):
        """Test net benefit (savings minus cost) appears, negative when cost exceeds savings."""
        result = runner.invoke(app, self.ARGS + ["-o", "plain"])

        assert "líquido -R$ 1.250,00" in result.output


class TestAmountNotation:
    """Tests for amounts typed on the command line."""

    def test_thousands_dots_without_decimals(self):
        """Test '2.500.000' is read as two and a half million reais."""
        result = runner.invoke(app, ["compare", "-r", "2.500.000", "-s", "SERVIÇO", "-o", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["simplified"]["annual_tax_liability"] == 22000000


class TestForecastCommand:
    """Tests for the forecast command."""

    ARGS = [
        "forecast",
        "-r", "1.200.000,00",
        "-d", "600.000,00",
        "-s", "COMÉRCIO",
        "--sazonalidade", "1.5",
        "--crescimento-despesas", "0.1",
        "-m", "2",
    ]

    def test_json_output(self):
        """Test projected months and recommended regime."""
        result = runner.invoke(app, self.ARGS + ["-o", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [m["month"] for m in data["monthly_forecasts"]] == [1, 2]
        assert data["monthly_forecasts"][0]["recommended_regime"] == "LUCRO_PRESUMIDO"
        assert data["annual_summary"]["total_projected_revenue"] == 180000000

    def test_regime_option(self):
        """Test the regime option selects regimes case-insensitively."""
        result = runner.invoke(app, self.ARGS + ["--regime", "lucro_real", "-o", "json"])

        forecasts = json.loads(result.output)["monthly_forecasts"][0]["regime_forecasts"]
        assert [f["regime"] for f in forecasts] == ["LUCRO_REAL"]

    def test_plain_output(self):
        result = runner.invoke(app, self.ARGS + ["-o", "plain"])

        assert result.exit_code == 0
        assert "LUCRO PRESUMIDO: R$ 6.420,00" in result.output

    def test_table_output(self):
        result = runner.invoke(app, self.ARGS)

        assert result.exit_code == 0
        assert "Resumo Anual" in result.output

    def test_months_out_of_range(self):
        """Test more than 12 months exits with code 1."""
        result = runner.invoke(app, ["forecast", "-r", "1000", "-m", "13"])

        assert result.exit_code == 1
