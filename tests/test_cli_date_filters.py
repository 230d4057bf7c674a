"""Tests for CLI date and amount helpers."""

from datetime import UTC, datetime
from decimal import Decimal

import click
import pytest

from fintrack.cli.date_filters import resolve_cli_amount, resolve_cli_datetime

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_resolve_cli_datetime_none():
    assert resolve_cli_datetime(_ctx(), None, "date") is None


def test_resolve_cli_datetime_relative():
    assert resolve_cli_datetime(_ctx(), "yesterday", "date", now=NOW) == datetime(
        2024, 6, 14, tzinfo=UTC
    )


def test_resolve_cli_datetime_rejects_garbage(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_datetime(_ctx(), "gibberish", "start date", now=NOW)

    assert excinfo.value.exit_code == 1
    assert "Invalid start date" in capsys.readouterr().err


def test_resolve_cli_amount():
    assert resolve_cli_amount(_ctx(), "$1,250.75") == Decimal("1250.75")


def test_resolve_cli_amount_rejects_garbage(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_amount(_ctx(), "twelve", "target amount")

    assert excinfo.value.exit_code == 1
    assert "Invalid target amount" in capsys.readouterr().err
