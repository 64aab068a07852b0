"""BDD step definitions for command-line features."""

from dataclasses import dataclass
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, then, when

from evaldash.cli import main
from evaldash.config import Settings


@dataclass
class CliScenarioContext:
    """State shared between the steps of one scenario."""

    settings: Settings | None = None
    exit_code: int | None = None
    out: str = ""
    err: str = ""


@pytest.fixture
def ctx() -> CliScenarioContext:
    """Fresh scenario context for each test."""
    return CliScenarioContext()


# === Background Steps ===
@given("an empty data directory")
def step_empty_data_dir(ctx: CliScenarioContext, tmp_path: Path) -> None:
    ctx.settings = Settings(data_dir=tmp_path / "data")


# === Actions ===
@when(parsers.parse('I run "{command}"'))
def step_run(
    ctx: CliScenarioContext, command: str, capsys: pytest.CaptureFixture[str]
) -> None:
    ctx.exit_code = main(command.split(), settings=ctx.settings)
    captured = capsys.readouterr()
    ctx.out, ctx.err = captured.out, captured.err


# === Assertions ===
@then(parsers.parse("the exit status is {code:d}"))
def step_exit_status(ctx: CliScenarioContext, code: int) -> None:
    assert ctx.exit_code == code


@then(parsers.parse('the output contains "{text}"'))
def step_output_contains(ctx: CliScenarioContext, text: str) -> None:
    assert text in ctx.out


@then(parsers.parse('the error output contains "{text}"'))
def step_error_contains(ctx: CliScenarioContext, text: str) -> None:
    assert text in ctx.err


@then(parsers.parse("the output lists {count:d} records"))
def step_output_lists(ctx: CliScenarioContext, count: int) -> None:
    assert len(ctx.out.strip().splitlines()) == count


@then(parsers.parse('the listed records are "{expected}"'))
def step_listed_records(ctx: CliScenarioContext, expected: str) -> None:
    listed = [line.split(" | ", 1)[1] for line in ctx.out.strip().splitlines()]
    assert listed == expected.split(", ")


@then("the metric log does not exist")
def step_no_metric_log(ctx: CliScenarioContext) -> None:
    assert ctx.settings is not None
    assert not ctx.settings.metrics_file.exists()


@then("the dashboard exists")
def step_dashboard_exists(ctx: CliScenarioContext) -> None:
    assert ctx.settings is not None
    assert ctx.settings.dashboard_file.is_file()


@then("the dashboard does not exist")
def step_no_dashboard(ctx: CliScenarioContext) -> None:
    assert ctx.settings is not None
    assert not ctx.settings.dashboard_file.exists()


@then(parsers.parse('the dashboard contains "{text}"'))
def step_dashboard_contains(ctx: CliScenarioContext, text: str) -> None:
    assert ctx.settings is not None
    assert text in ctx.settings.dashboard_file.read_text(encoding="utf-8")
