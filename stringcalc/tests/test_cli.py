"""Tests for the stringcalc command line."""

import json

import pytest
from typer.testing import CliRunner

from stringcalc.__main__ import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's STRINGCALC_* settings out of the tests."""
    monkeypatch.delenv("STRINGCALC_ESCAPES", raising=False)
    monkeypatch.delenv("STRINGCALC_OUTPUT", raising=False)


# --- add ---

def test_add_prints_sum():
    result = runner.invoke(app, ["add", "1,2"])
    assert result.exit_code == 0
    assert result.output.strip() == "3"


def test_add_interprets_newline_escape():
    result = runner.invoke(app, ["add", "//;\\n1;2"])
    assert result.exit_code == 0
    assert result.output.strip() == "3"


def test_add_raw_keeps_backslashes():
    result = runner.invoke(app, ["add", "--raw", "1\\n2"])
    assert result.exit_code == 1
    assert "Invalid number" in result.output


def test_add_escapes_disabled_by_env(monkeypatch):
    monkeypatch.setenv("STRINGCALC_ESCAPES", "0")
    result = runner.invoke(app, ["add", "1\\n2"])
    assert result.exit_code == 1


def test_add_negative_fails():
    result = runner.invoke(app, ["add", "1,-2,-3"])
    assert result.exit_code == 1
    assert "Negative numbers not allowed: -2, -3" in result.output


def test_add_json_success():
    result = runner.invoke(app, ["add", "--json", "2,1001"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"input": "2,1001", "status": "success", "result": 2}


def test_add_json_failure():
    result = runner.invoke(app, ["add", "--json", "1,-2"])
    assert result.exit_code == 1
    data = json.loads(result.output)
    assert data["status"] == "failure"
    assert data["error"] == "Negative numbers not allowed: -2"
    assert data["error_code"] == "negative_numbers"


def test_add_json_from_env(monkeypatch):
    monkeypatch.setenv("STRINGCALC_OUTPUT", "json")
    result = runner.invoke(app, ["add", "1,2"])
    assert json.loads(result.output)["result"] == 3


def test_add_verbose_shows_tokens():
    result = runner.invoke(app, ["add", "--verbose", "1,1001"])
    assert result.exit_code == 0
    assert "comma or newline" in result.output
    assert "Ignored" in result.output
    assert result.output.strip().splitlines()[-1] == "1"


# --- explain ---

def test_explain_table():
    result = runner.invoke(app, ["explain", "1000,1001,2"])
    assert result.exit_code == 0
    assert "Breakdown" in result.output
    assert "1001" in result.output
    assert "1002" in result.output


def test_explain_negatives_exit_nonzero():
    result = runner.invoke(app, ["explain", "1,-2"])
    assert result.exit_code == 1
    assert "rejected" in result.output


def test_explain_bad_delimiter():
    result = runner.invoke(app, ["explain", "//;1;2"])
    assert result.exit_code == 1
    assert "Error" in result.output


# --- check ---

def test_check_all_pass():
    result = runner.invoke(app, ["check", "1,2", "//|\\n1|2|3"])
    assert result.exit_code == 0
    assert "2/2 succeeded" in result.output


def test_check_reports_failures():
    result = runner.invoke(app, ["check", "1,2", "1,-2"])
    assert result.exit_code == 1
    assert "failure" in result.output
    assert "1/2 succeeded" in result.output


def test_check_json():
    result = runner.invoke(app, ["check", "--json", "1,2", "1,a"])
    assert result.exit_code == 1
    data = json.loads(result.output)
    assert [d["status"] for d in data] == ["success", "failure"]
    assert data[0]["result"] == 3
    assert data[1]["error_code"] == "invalid_number"


def test_no_args_shows_help():
    result = runner.invoke(app, [])
    assert "add" in result.output


# --- Inputs starting with "-" ---

def test_add_leading_negative():
    result = runner.invoke(app, ["add", "-1,2"])
    assert result.exit_code == 1
    assert "Negative numbers not allowed: -1" in result.output


def test_add_leading_negative_after_double_dash():
    result = runner.invoke(app, ["add", "--", "-1,-2"])
    assert result.exit_code == 1
    assert "Negative numbers not allowed: -1, -2" in result.output


def test_add_leading_negative_json():
    result = runner.invoke(app, ["add", "--json", "-5"])
    assert result.exit_code == 1
    assert json.loads(result.output)["error"] == "Negative numbers not allowed: -5"


def test_explain_leading_negative():
    result = runner.invoke(app, ["explain", "-3,4"])
    assert result.exit_code == 1
    assert "rejected" in result.output


def test_check_leading_negative():
    result = runner.invoke(app, ["check", "--json", "-1", "2"])
    assert result.exit_code == 1
    data = json.loads(result.output)
    assert [d["status"] for d in data] == ["failure", "success"]


def test_add_huge_number():
    result = runner.invoke(app, ["add", "1," + "9" * 5000])
    assert result.exit_code == 0
    assert result.output.strip() == "1"
