from __future__ import annotations

from pathlib import Path

import typer

from checkmark.conditions.labels import LabelStyle

app = typer.Typer(name="checkmark", help="Evaluate describable conditions")

EXAMPLE_CHECKS = """\
label_style: symbols

cases:
  - name: short-word
    value: foooo
    conditions:
      - shorter_than: 100
      - shorter_than: 4
        description: not be longer
      - any_of:
          - is_null: true
          - equal_to: foooo
"""


@app.command()
def run(
    checks: str = typer.Argument(help="Path to checks YAML file"),
    labels: LabelStyle | None = typer.Option(
        None, "--labels", help="State label style (overrides label_style in the file)"
    ),
    junit: str | None = typer.Option(None, help="Write a JUnit XML report to this path"),
    debug_log: str | None = typer.Option(None, help="Append debug output to this file"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Evaluate every case in a checks file and print the rendered conditions."""
    from pydantic import ValidationError

    from checkmark.config import load_config
    from checkmark.runner import run_checks
    from checkmark.verbose import setup_logger

    checks_path = Path(checks)
    if not checks_path.exists():
        typer.echo(f"Error: checks file not found: {checks}", err=True)
        raise typer.Exit(1)

    try:
        check_config = load_config(checks_path)
    except (ValueError, ValidationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if labels is not None:
        check_config.label_style = labels

    # the package logger, so checkmark.* module loggers reach the same handlers
    logger = setup_logger(
        Path(debug_log) if debug_log else None,
        verbose=verbose,
        logger_name="checkmark",
    )
    logger.debug(f"Loaded {len(check_config.cases)} cases from {checks_path}")

    try:
        results = run_checks(check_config, logger=logger)
    except Exception as e:
        logger.debug(f"Evaluation failed: {type(e).__name__}: {e}")
        typer.echo(f"Error: evaluating checks failed: {type(e).__name__}: {e}", err=True)
        raise typer.Exit(1)

    for case_result in results:
        status = "PASS" if case_result.all_passed else "FAIL"
        typer.echo(f"{status} {case_result.name}")
        for assertion in case_result.assertions:
            typer.echo(f"  {assertion.message}".replace("\n", "\n  "))

    if junit:
        from checkmark.reporting.junit import write_junit

        report_path = write_junit(results, Path(junit))
        typer.echo(f"JUnit report: {report_path}")

    if not all(r.all_passed for r in results):
        raise typer.Exit(1)


@app.command()
def init(
    dir: str = typer.Option(
        "checkmark", "--dir", help="Directory to write the example checks file in"
    ),
):
    """Write an example checks.yaml."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    example = project_dir / "checks.yaml"
    if example.exists():
        typer.echo(f"checks.yaml already exists in {dir}, skipping.")
        return

    example.write_text(EXAMPLE_CHECKS)
    typer.echo(f"Initialized checks in {dir}:")
    typer.echo("  checks.yaml      - example checks file")
