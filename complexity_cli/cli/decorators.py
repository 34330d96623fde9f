"""
Decorators for Complexity CLI commands.
"""

import traceback
from functools import wraps
from typing import Callable

import typer
from rich.console import Console
from rich.markup import escape

from complexity_cli.core.exceptions import ComplexityCLIError
from complexity_cli.core.logging import is_debug_enabled

console = Console(stderr=True)


def with_error_handling(func: Callable) -> Callable:
    """Decorator to handle common error patterns in CLI commands."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (typer.Exit, typer.Abort):
            raise
        except ComplexityCLIError as e:
            console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
            if kwargs.get("debug") or is_debug_enabled():
                console.print(escape(traceback.format_exc()))
            raise typer.Exit(code=1)
        except Exception as e:
            console.print(f"[bold red]Error in {func.__name__}:[/bold red] {escape(str(e))}")
            if kwargs.get("debug") or is_debug_enabled():
                console.print(escape(traceback.format_exc()))
            raise typer.Exit(code=1)

    return wrapper
