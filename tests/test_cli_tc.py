"""
Tests para cli/tc.py - Comandos de tiempo de concentración.
"""

import pytest
import typer
from typer.testing import CliRunner

from hidrocuenca.cli import app
from hidrocuenca.cli.tc import (
    tc_app,
    tc_kerby,
    tc_kirpich,
    tc_scs,
)


runner = CliRunner()


class TestTcScs:
    """Tests para comando tc scs."""

    def test_basic_calculation(self, capsys):
        """Test cálculo básico SCS en unidades imperiales."""
        tc_scs(length=4000.0, slope=0.10, cn=82, units="si")

        captured = capsys.readouterr()
        assert "SCS" in captured.out
        assert "Tc = 0.476 horas" in captured.out
        assert "minutos" in captured.out
        assert "Retención S" in captured.out
        assert "pulg" in captured.out

    def test_invalid_cn(self, capsys):
        """Test CN fuera de rango termina con error."""
        with pytest.raises(typer.Exit) as exc_info:
            tc_scs(length=4000.0, slope=0.10, cn=150, units="si")
        assert exc_info.value.exit_code == 1
        assert "CN debe estar entre 0 y 100" in capsys.readouterr().out


class TestTcKirpich:
    """Tests para comando tc kirpich."""

    def test_basic_calculation(self, capsys):
        """Test cálculo básico Kirpich."""
        tc_kirpich(length=1000.0, slope=0.02, units="m")

        captured = capsys.readouterr()
        assert "1000" in captured.out
        assert "KIRPICH" in captured.out
        assert "Tc =" in captured.out
        assert "Tp =" in captured.out
        assert "Tlag =" in captured.out

    def test_shows_slope_percentage(self, capsys):
        """Test muestra pendiente en porcentaje."""
        tc_kirpich(length=1000.0, slope=0.0223, units="m")

        captured = capsys.readouterr()
        assert "2.23%" in captured.out

    def test_invalid_units(self, capsys):
        """Test unidades inválidas."""
        with pytest.raises(typer.Exit):
            tc_kirpich(length=1000.0, slope=0.02, units="ft")
        assert "Sistema de unidades" in capsys.readouterr().out

    def test_negative_length(self, capsys):
        """Test longitud negativa."""
        with pytest.raises(typer.Exit):
            tc_kirpich(length=-10.0, slope=0.02, units="m")
        assert "positivo" in capsys.readouterr().out


class TestTcKerby:
    """Tests para comando tc kerby."""

    def test_basic_calculation(self, capsys):
        """Test cálculo básico Kerby."""
        tc_kerby(length=300.0, slope=0.01, manning=0.4, units="m")

        captured = capsys.readouterr()
        assert "KERBY" in captured.out
        assert "Tc =" in captured.out


class TestTcAppCLI:
    """Tests de integración usando CliRunner."""

    def test_kirpich_via_cli(self):
        """Test comando kirpich via CLI."""
        result = runner.invoke(tc_app, ["kirpich", "1000", "0.02"])
        assert result.exit_code == 0
        assert "Tc =" in result.output

    def test_scs_via_cli(self):
        """Test comando scs via CLI."""
        result = runner.invoke(tc_app, ["scs", "4000", "0.10", "--cn", "82", "--units", "si"])
        assert result.exit_code == 0
        assert "Tc = 0.476" in result.output

    def test_kerby_via_main_app(self):
        """Test kerby desde la aplicación principal."""
        result = runner.invoke(app, ["tc", "kerby", "300", "0.01", "-n", "0.4"])
        assert result.exit_code == 0
        assert "Tc =" in result.output

    def test_log_level_option(self):
        """Test opción global de logging."""
        result = runner.invoke(app, ["--log-level", "WARNING", "tc", "kirpich", "1000", "0.02"])
        assert result.exit_code == 0

    def test_invalid_units_exit_code(self):
        """Test código de salida con unidades inválidas."""
        result = runner.invoke(tc_app, ["kirpich", "1000", "0.02", "--units", "xx"])
        assert result.exit_code == 1

    def test_help(self):
        """Test help del app."""
        result = runner.invoke(tc_app, ["--help"])
        assert result.exit_code == 0
        assert "scs" in result.output
        assert "kirpich" in result.output
        assert "kerby" in result.output
