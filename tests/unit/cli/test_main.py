"""Unit tests for CLI command handling."""

from __future__ import annotations

import pytest

from cli.main import main


def test_cli_filter_prints_matching_users(capsys) -> None:
    """CLI filter should print one formatted record per match."""
    exit_code = main(["filter", "--tag", "user", "--where", "age=23"])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0
    assert output == ["Kate Müller (23, Astronaut)", "Wilson (23, Ball)"]


def test_cli_filter_combines_repeated_constraints(capsys) -> None:
    """Repeated --where options should all apply."""
    exit_code = main(
        ["filter", "--tag", "admin", "--where", "age=64", "--where", "name=Bruce Willis"]
    )
    output = capsys.readouterr().out.strip()

    assert exit_code == 0 and output == "Bruce Willis (64, Manager)"


def test_cli_filter_without_matches_prints_nothing(capsys) -> None:
    """No matches should succeed with empty output."""
    exit_code = main(["filter", "--tag", "admin", "--where", "age=99"])
    output = capsys.readouterr().out

    assert exit_code == 0 and output == ""


def test_cli_filter_reports_unknown_tag_without_traceback(capsys) -> None:
    """Unknown tags should print a friendly error and exit one."""
    exit_code = main(["filter", "--tag", "moderator"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output.startswith("filter_error=")


def test_cli_filter_reports_field_outside_variant(capsys) -> None:
    """Constraint fields of the other variant should be rejected."""
    exit_code = main(["filter", "--tag", "user", "--where", "role=Manager"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and "role" in output


def test_cli_filter_reports_bad_numeric_value(capsys) -> None:
    """Non-numeric ages should be rejected before filtering."""
    exit_code = main(["filter", "--tag", "user", "--where", "age=old"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output.startswith("filter_error=")


def test_cli_fields_lists_constraint_fields(capsys) -> None:
    """Fields command should list legal keys for the tag."""
    exit_code = main(["fields", "--tag", "admin"])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and output == ["name", "age", "role"]


def test_cli_reports_invalid_log_level(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    """Invalid logging config should fail with a friendly error."""
    monkeypatch.setenv("RECORD_FILTER_LOG_LEVEL", "loud")

    exit_code = main(["fields", "--tag", "user"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and "RECORD_FILTER_LOG_LEVEL" in output


def test_cli_requires_command() -> None:
    """Missing subcommand should be an argparse usage error."""
    with pytest.raises(SystemExit):
        main([])
