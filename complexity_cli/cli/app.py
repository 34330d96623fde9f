"""
Main Typer app and command definitions for Complexity CLI.
"""

from typing import Optional

import typer

from complexity_cli.core.logging import configure_logging

from .completions import Completions
from .decorators import with_error_handling
from .handlers import CommandHandlers
from .options import resolve_options

# Create main typer app
app = typer.Typer(
    help="Complexity CLI - heuristic line-by-line time complexity estimates",
    add_completion=True,
    rich_markup_mode="markdown",
)


# ---- Commands ----


@app.command()
@with_error_handling
def analyze(
    source: Optional[str] = typer.Argument(
        None, help="Source file to analyze. Reads stdin until END when omitted or '-'."
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: detailed, table or json",
        autocompletion=Completions.output_formats,
    ),
    lines: Optional[str] = typer.Option(
        None, "--lines", help="Lines to display (e.g., '1,2,5-7')"
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Write the full result as JSON to this file"
    ),
    sentinel: Optional[str] = typer.Option(
        None, "--sentinel", help="Line that ends input (default: END)"
    ),
    no_reasons: bool = typer.Option(False, "--no-reasons", help="Hide reasons"),
    no_summary: bool = typer.Option(False, "--no-summary", help="Hide summary"),
    config: Optional[str] = typer.Option(None, "--config", help="Config file"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Log file"),
):
    """Estimate the time complexity of each line of code."""
    options = resolve_options(
        format_override=output_format,
        sentinel_override=sentinel,
        config_override=config,
        debug_override=debug,
        verbose_override=verbose,
        log_file_override=log_file,
        no_reasons_override=no_reasons,
        no_summary_override=no_summary,
    )

    CommandHandlers.handle_analyze(options, source, lines, output)


@app.command()
@with_error_handling
def classes(
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
):
    """List complexity classes and the loop depth each one stands for."""
    configure_logging(debug=debug)
    CommandHandlers.handle_classes()


def main():
    app()


if __name__ == "__main__":
    main()
