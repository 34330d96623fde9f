from collections import Counter
from typing import Any, Iterable, Optional, Union

from rich.box import ROUNDED
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.rule import Rule
from rich.style import Style
from rich.table import Table
from rich.text import Text

from complexity_cli.analyzer import (
    DEPTH_TABLE,
    AnalysisResult,
    ComplexityClass,
    LineRecord,
)
from complexity_cli.core.formatting import format_time, pluralize, truncate_code

# ==============================================================================
# Constants & Global Console
# ==============================================================================

console = Console(highlight=False)

# Define custom styles
SUCCESS_STYLE = Style(color="green", bold=True)
WARNING_STYLE = Style(color="yellow", bold=True)
INFO_STYLE = Style(color="blue", bold=True)
BOLD_STYLE = Style(bold=True)
DIM_STYLE = Style(dim=True)
CYAN_STYLE = Style(color="cyan")
WHITE_STYLE = Style(color="white")

# One colour per complexity class
COMPLEXITY_STYLES = {
    ComplexityClass.CONSTANT: Style(color="green"),
    ComplexityClass.LINEAR: Style(color="yellow"),
    ComplexityClass.QUADRATIC: Style(color="red"),
    ComplexityClass.CUBIC: Style(color="magenta"),
    ComplexityClass.LINEARITHMIC: Style(color="cyan"),
    ComplexityClass.UNKNOWN: Style(color="white"),
}

# ==============================================================================
# Private Helper Functions
# ==============================================================================

def _create_panel(
    content: RenderableType,
    title: Optional[str] = None,
    border_style: Union[str, Style] = "blue",
    padding: tuple = (1, 2),
    box: Any = ROUNDED,
    **kwargs: Any
) -> Panel:
    """Helper function to create a Rich Panel."""
    return Panel(
        content,
        title=title,
        border_style=border_style,
        padding=padding,
        box=box,
        **kwargs
    )

def _create_table(
    title: Optional[str] = None,
    box: Any = ROUNDED,
    show_header: bool = True,
    header_style: Union[str, Style] = "bold blue",
    **kwargs: Any
) -> Table:
    """Helper function to create a Rich Table."""
    return Table(
        title=title,
        box=box,
        show_header=show_header,
        header_style=header_style,
        **kwargs
    )

def _print_status_message(icon: str, msg: str, style: Union[str, Style]):
    """Helper function to print simple status messages."""
    console.print(Text.assemble((icon, style), "  ", (msg, style)))

def complexity_text(complexity: ComplexityClass) -> Text:
    """Render a complexity class as coloured Big-O notation."""
    return Text(complexity.notation, style=COMPLEXITY_STYLES[complexity])

# ==============================================================================
# General UI Elements
# ==============================================================================

def print_banner():
    """Print the tool banner."""
    banner_content = Text.assemble(
        ("Time Complexity Analyzer", BOLD_STYLE + CYAN_STYLE),
        "\n",
        ("Heuristic line-by-line Big-O estimates", DIM_STYLE)
    )
    console.print(_create_panel(banner_content, padding=(1, 2)))

def print_divider(title: Optional[str] = None):
    """Print a styled divider with optional title."""
    console.print(Rule(title=title, style=INFO_STYLE))

def print_info(msg: str):
    """Print an informational message (neutral information)."""
    _print_status_message("ℹ", msg, INFO_STYLE)

def print_warning(msg: str):
    """Print a warning message (caution but not error)."""
    _print_status_message("⚠", msg, WARNING_STYLE)

def print_success(msg: str):
    """Print a success message (operation completed successfully)."""
    _print_status_message("✓", msg, SUCCESS_STYLE)

# ==============================================================================
# Line-by-Line Output
# ==============================================================================

def print_line_record(record: LineRecord, show_reason: bool = True):
    """Display one analyzed line in the detailed layout."""
    console.print(Text.assemble(
        (f"Line {record.line_number:>3}: ", BOLD_STYLE),
        (record.text, WHITE_STYLE),
    ))
    console.print(Text.assemble(
        "  ",
        ("->", SUCCESS_STYLE),
        " Complexity: ",
        complexity_text(record.complexity),
    ))
    if show_reason:
        console.print(Text.assemble(
            "  ",
            ("* ", WARNING_STYLE),
            "Reason: ",
            (record.reason, COMPLEXITY_STYLES[record.complexity]),
        ))
    console.print(Rule(style=DIM_STYLE))

def print_line_analysis(records: Iterable[LineRecord], show_reasons: bool = True):
    """Display every record in the detailed layout."""
    print_divider("Line-by-Line Complexity Analysis")
    for record in records:
        print_line_record(record, show_reason=show_reasons)

def print_line_table(
    records: Iterable[LineRecord],
    show_reasons: bool = True,
    max_code_width: int = 60,
):
    """Display records as a single table."""
    table = _create_table(title="[bold]Line-by-Line Complexity Analysis[/bold]")
    table.add_column("Line", style="cyan", justify="right", width=6)
    table.add_column("Code", no_wrap=True, max_width=max_code_width)
    table.add_column("Complexity", width=12)
    if show_reasons:
        table.add_column("Reason", style="dim")

    for record in records:
        row = [
            str(record.line_number),
            Text(truncate_code(record.text, max_code_width)),
            complexity_text(record.complexity),
        ]
        if show_reasons:
            row.append(record.reason)
        table.add_row(*row)

    console.print(table)

# ==============================================================================
# Summary Output
# ==============================================================================

def print_final_complexity(result: AnalysisResult):
    """Print the aggregate complexity in a panel."""
    content = Text.assemble(
        ("Final Complexity: ", BOLD_STYLE),
        complexity_text(result.overall),
        ("\n", "default"),
        (f"Maximum loop nesting depth: {result.max_nesting_depth}", DIM_STYLE),
    )
    console.print(_create_panel(
        content,
        border_style=COMPLEXITY_STYLES[result.overall],
        padding=(0, 2),
    ))

def print_analysis_summary(result: AnalysisResult, duration: Optional[float] = None):
    """Display per-class line counts and discovered functions."""
    counts = Counter(record.complexity for record in result.records)

    table = _create_table(title="[bold]Analysis Summary[/bold]")
    table.add_column("Complexity", width=12)
    table.add_column("Lines", justify="right", style="cyan")
    for complexity in ComplexityClass:
        if counts[complexity]:
            table.add_row(complexity_text(complexity), str(counts[complexity]))
    console.print(table)

    if result.function_definitions:
        names = ", ".join(sorted(result.function_definitions))
        print_info(f"Functions found: {names}")

    footer = f"Analyzed {pluralize(len(result.records), 'line')}"
    if duration is not None:
        footer += f" in {format_time(duration)}"
    console.print(Text(footer, style=DIM_STYLE))

# ==============================================================================
# Reference Output
# ==============================================================================

def print_complexity_classes():
    """List the complexity classes and the nesting depth each one stands for."""
    table = _create_table(title="[bold]Complexity Classes[/bold]")
    table.add_column("Class", style="bold")
    table.add_column("Notation", width=12)
    table.add_column("Max loop depth", justify="right", style="cyan")

    for complexity in ComplexityClass:
        if complexity in DEPTH_TABLE:
            depth = str(DEPTH_TABLE.index(complexity))
        elif complexity is ComplexityClass.LINEARITHMIC:
            depth = f"{len(DEPTH_TABLE)}+"
        else:
            depth = "-"
        table.add_row(complexity.name.title(), complexity_text(complexity), depth)

    console.print(table)
