"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from simple_api_tester.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_test_suite,
    write_placeholder_configuration,
)
from simple_api_tester.console_narration import ConsoleRunNarrator, QuietRunNarrator
from simple_api_tester.run_execution import RunExecutionError, RunRequest, execute_api_test_run

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="simple-api-tester")
def cli() -> None:
    """Declarative, sequential API test runner."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML test suite template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a sample YAML test suite with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="validate-config")
@click.argument("config_path", type=click.Path(path_type=str))
def validate_config(config_path: str) -> None:
    """Check a test suite file and print the execution plan without sending requests."""
    try:
        suite = load_test_suite(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"{len(suite.test_cases)} test cases in {suite.path}")
    for test_case in suite.test_cases:
        click.echo(
            f"  [{test_case.order}] {test_case.name}: "
            f"{test_case.method.value} {test_case.endpoint}"
        )


@cli.command(name="run")
@click.argument("config_path", type=click.Path(path_type=str))
@click.option(
    "--base-url",
    "base_url",
    required=False,
    default="",
    help="Base URL prepended to every test case endpoint",
)
@click.option(
    "--stop-on-failure",
    is_flag=True,
    default=False,
    help="Stop execution after the first failed test case.",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Export results to a file (.json, or .xlsx for a workbook)",
)
@click.option("--quiet", is_flag=True, default=False, help="Suppress progress output.")
@click.option("--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
@click.pass_context
def run_tests(  # pylint: disable=too-many-arguments
    ctx: click.Context,
    config_path: str,
    base_url: str,
    stop_on_failure: bool,
    output_path: str | None,
    quiet: bool,
    verbose: bool,
) -> None:
    """Execute the test cases of a suite file against the target service."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=_LOG_FORMAT, stream=sys.stderr)
    narrator = QuietRunNarrator() if quiet else ConsoleRunNarrator()
    try:
        outcome = execute_api_test_run(
            RunRequest(
                config_path=config_path,
                base_url=base_url,
                stop_on_failure=stop_on_failure,
                output_path=output_path,
            ),
            narrator=narrator,
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    if not outcome.all_passed:
        ctx.exit(1)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        exit_code = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
