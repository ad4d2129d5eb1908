from __future__ import annotations

import logging
from pathlib import Path

import typer

from inorder.cases import CheckOutcome, load_cases, run_cases
from inorder.config import InorderConfig, load_config, load_project_config
from inorder.constants import EXIT_SUCCESS, EXIT_USAGE_ERROR
from inorder.equality.strings import BUILTIN_NORMALIZATIONS
from inorder.errors import InorderError

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        from inorder import __version__

        typer.echo(f"inorder {__version__}")
        raise typer.Exit()


app = typer.Typer(add_completion=False, help="Ordered containment checks with normalized equality")


@app.callback(invoke_without_command=True)
def _main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _resolve_config(config_path: Path | None, project_root: Path) -> InorderConfig:
    if config_path is not None:
        return load_config(config_path.resolve())
    return load_project_config(project_root.resolve())


def _emit_outcome(outcome: CheckOutcome) -> None:
    for result in outcome.results:
        if result.error is not None:
            typer.echo(f"ERROR {result.case.name}: {result.error.message}", err=True)
        else:
            typer.echo(f"{result.status} {result.case.name}")

    passed = len(outcome.results) - len(outcome.failed)
    typer.echo(f"{passed}/{len(outcome.results)} case(s) passed")
    raise typer.Exit(outcome.exit_code)


@app.command()
def check(
    cases_file: Path = typer.Argument(..., exists=True, file_okay=True, dir_okay=False, help="YAML case file"),
    config_path: Path | None = typer.Option(
        None, "--config", exists=True, file_okay=True, dir_okay=False, help="Path to inorder.yaml"
    ),
    project_root: Path = typer.Option(Path("."), "--project-root", help="Where to look for inorder.yaml"),
) -> None:
    """Evaluate ordered-containment cases from a YAML file."""
    try:
        config = _resolve_config(config_path, project_root)
        cases = load_cases(cases_file.resolve())
    except InorderError as exc:
        typer.echo(f"ERROR: {exc.message}", err=True)
        raise typer.Exit(EXIT_USAGE_ERROR) from exc

    logger.debug("loaded %d case(s) from %s", len(cases), cases_file)
    _emit_outcome(run_cases(cases, config))


@app.command()
def normalizations(
    config_path: Path | None = typer.Option(
        None, "--config", exists=True, file_okay=True, dir_okay=False, help="Path to inorder.yaml"
    ),
    project_root: Path = typer.Option(Path("."), "--project-root", help="Where to look for inorder.yaml"),
) -> None:
    """List built-in normalizations and configured chains."""
    try:
        config = _resolve_config(config_path, project_root)
    except InorderError as exc:
        typer.echo(f"ERROR: {exc.message}", err=True)
        raise typer.Exit(EXIT_USAGE_ERROR) from exc

    for name in sorted(BUILTIN_NORMALIZATIONS):
        typer.echo(name)
    for name, steps in sorted(config.normalizations.items()):
        typer.echo(f"{name} = {' & '.join(steps)}")
    raise typer.Exit(EXIT_SUCCESS)


if __name__ == "__main__":
    app()
