import logging
import sys
from pathlib import Path

import typer
from clang_format_hook.aggregator import check_files
from clang_format_hook.discovery import discover_inputs
from clang_format_hook.errors import FormatHookError
from clang_format_hook.models import CheckSettings

from .config import DEFAULT_CONFIG_PATH, HookConfig
from .converters import summary_to_report
from .models import OutputFormat

PROG_NAME = "clang-format-hook"

# typer re-exports BadParameter from the click it runs on (its own bundled
# copy in recent releases); the base class is that click's UsageError, which
# NoSuchOption and MissingParameter also derive from.
UsageError = typer.BadParameter.__base__

app = typer.Typer(
    help="Checks the given inputs for code style changes",
    add_completion=False,
    rich_markup_mode=None,
)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.command()
def check(
    inputs: list[Path] = typer.Argument(..., help="Files or directories to check"),
    clang_format: str | None = typer.Option(
        None, "-c", "--clang-format", help="The clang-format executable to use"
    ),
    jobs: int | None = typer.Option(None, "-j", "--jobs", min=1, help="Number of parallel checks"),
    extensions: list[str] | None = typer.Option(
        None, "-e", "--extension", help="File extension to check (repeatable)"
    ),
    config_file: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config file"),
    output_format: OutputFormat = typer.Option(OutputFormat.TEXT, "--output-format", help="Report format"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """Checks the given inputs for code style changes"""
    setup_logging(verbose)
    config = HookConfig(config_file)

    settings = CheckSettings(
        clang_format_exe=clang_format or config.clang_format,
        echo=output_format is OutputFormat.TEXT,
    )
    if jobs or config.jobs:
        settings.jobs = jobs or config.jobs

    try:
        files = discover_inputs(inputs, extensions or config.extensions)
        summary = check_files(files, settings)
    except FormatHookError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format is OutputFormat.JSON:
        typer.echo(summary_to_report(summary).model_dump_json(indent=2))
    elif summary.needs_formatting:
        typer.echo(f"\n{len(summary.verdicts)} of {summary.files_checked} file(s) need formatting")

    raise typer.Exit(code=summary.exit_code)


def run(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit code.

    Usage errors exit with 1 rather than click's default of 2, which is
    reserved for files that need formatting.
    """
    command = typer.main.get_command(app)
    try:
        rv = command.main(args=argv, prog_name=PROG_NAME, standalone_mode=False)
    except UsageError as e:
        typer.echo(f"Error: {e.format_message()}", err=True)
        if e.ctx is not None:
            typer.echo(e.ctx.get_help(), err=True)
        return 1
    except typer.Abort:
        typer.echo("Aborted!", err=True)
        return 1
    return rv if isinstance(rv, int) else 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
