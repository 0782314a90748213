from __future__ import annotations

from pathlib import Path
from typing import Any

import typer

app = typer.Typer(name="matchbook", help="Define and evaluate custom matchers")
schema_app = typer.Typer(name="schema", help="Generate schema tooling")
app.add_typer(schema_app, name="schema")


def _parse_value(raw: str) -> Any:
    """Interpret a command-line value as a YAML scalar ("4" -> 4, "x" -> "x")."""
    import yaml

    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


def _load_registry(modules: list[str] | None):
    from matchbook.errors import MatcherError
    from matchbook.loader import DEFAULT_MODULES, load_matchers
    from matchbook.registry import MatcherRegistry

    try:
        return load_matchers(MatcherRegistry(), modules or DEFAULT_MODULES)
    except MatcherError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)


@app.command()
def run(
    suite: str = typer.Argument(help="Path to check suite YAML"),
    output_dir: str = typer.Option("runs", help="Output directory for run results"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Evaluate every check in a suite file."""
    from matchbook.config import load_config
    from matchbook.errors import MatcherError
    from matchbook.runner import Runner

    suite_path = Path(suite)
    if not suite_path.exists():
        typer.echo(f"Error: suite file not found: {suite}", err=True)
        raise typer.Exit(1)

    try:
        config = load_config(suite_path)
    except ValueError as e:
        typer.echo(f"Error: invalid suite file: {e}", err=True)
        raise typer.Exit(1)

    runner = Runner(config=config, output_dir=Path(output_dir), verbose=verbose)
    try:
        run_dir = runner.execute()
    except MatcherError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Run complete: {run_dir}")
    typer.echo(f"JUnit report: {run_dir / 'junit.xml'}")
    if not verbose:
        typer.echo(f"Debug log: {run_dir / 'debug.log'}")

    if runner.failed_count:
        raise typer.Exit(1)


@app.command()
def check(
    matcher: str = typer.Argument(help="Name of the matcher to apply"),
    actual: str = typer.Argument(help="Actual value, parsed as a YAML scalar"),
    expected: list[str] | None = typer.Option(
        None, "--expected", "-e", help="Expected argument (repeatable)"
    ),
    message: str | None = typer.Option(
        None, "--message", "-m", help="Override the result message"
    ),
    module: list[str] | None = typer.Option(
        None, "--module", help="Module providing register(registry) (repeatable)"
    ),
):
    """Evaluate a single matcher invocation."""
    from matchbook.errors import MatcherError

    registry = _load_registry(module)
    expected_args = [_parse_value(v) for v in expected or []]

    try:
        result = registry.invoke(matcher, expected_args, _parse_value(actual), message)
    except MatcherError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    status = "PASS" if result.passed else "FAIL"
    typer.echo(f"{status}  {result.message}")
    if not result.passed:
        raise typer.Exit(1)


@app.command("list")
def list_matchers(
    module: list[str] | None = typer.Option(
        None, "--module", help="Module providing register(registry) (repeatable)"
    ),
):
    """List registered matcher names."""
    registry = _load_registry(module)
    for name in registry.names():
        typer.echo(name)


@schema_app.command("generate")
def schema_generate(
    out: str = typer.Option(
        "schemas/matchbook.schema.json", help="Output path for JSON Schema"
    ),
):
    """Generate JSON Schema for the check suite YAML format."""
    from matchbook.schema import write_json_schema

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")
