"""
Command handlers for Complexity CLI - business logic separated from CLI interface.
"""

import sys
import time
from typing import List, Optional

from complexity_cli.analyzer import AnalysisResult, analyze_source
from complexity_cli.core.constants import INPUT_PROMPT, OUTPUT_JSON, OUTPUT_TABLE
from complexity_cli.core.data_utils import (
    load_source_file,
    parse_lines_arg,
    read_input,
    save_json,
)
from complexity_cli.core.logging import (
    log_context,
    log_info,
    log_performance,
    log_warning,
    logged_operation,
)
from complexity_cli.output import (
    console,
    print_analysis_summary,
    print_banner,
    print_complexity_classes,
    print_final_complexity,
    print_line_analysis,
    print_line_table,
    print_success,
    print_warning,
)

from .options import ResolvedOptions

STDIN_SOURCE = "-"


class CommandHandlers:
    """Handles the business logic for CLI commands."""

    @staticmethod
    def read_code(options: ResolvedOptions, source: Optional[str]) -> List[str]:
        """Read lines from a file, or from stdin when no file is given."""
        if source and source != STDIN_SOURCE:
            return load_source_file(source, sentinel=options.sentinel)

        if sys.stdin.isatty():
            console.print(
                f"[bold]{INPUT_PROMPT.format(sentinel=options.sentinel)}[/bold]\n"
            )
        return read_input(sys.stdin, sentinel=options.sentinel)

    @staticmethod
    def render(
        options: ResolvedOptions,
        result: AnalysisResult,
        lines_arg: Optional[str],
        duration: float,
    ):
        """Print an analysis result in the configured output format."""
        selected = parse_lines_arg(lines_arg, len(result.records))
        records = [r for r in result.records if r.line_number in selected]

        if options.output_format == OUTPUT_JSON:
            data = result.to_dict()
            data["lines"] = [record.to_dict() for record in records]
            console.print_json(data=data)
            return

        if options.show_banner:
            print_banner()

        if not result.records:
            print_warning("No code to analyze")
        elif options.output_format == OUTPUT_TABLE:
            print_line_table(
                records,
                show_reasons=options.show_reasons,
                max_code_width=options.max_code_width,
            )
        else:
            print_line_analysis(records, show_reasons=options.show_reasons)

        print_final_complexity(result)
        if options.show_summary:
            print_analysis_summary(result, duration=duration)

    @staticmethod
    @logged_operation("analyze_command")
    def handle_analyze(
        options: ResolvedOptions,
        source: Optional[str],
        lines_arg: Optional[str],
        output_path: Optional[str],
    ):
        """Handle the analyze command."""
        source_name = source if source and source != STDIN_SOURCE else "<stdin>"
        with log_context(source=source_name):
            code_lines = CommandHandlers.read_code(options, source)
            log_info(f"Read {len(code_lines)} line(s) from {source_name}")
            if not code_lines:
                log_warning("Input contained no lines before the sentinel")

            start_time = time.perf_counter()
            result = analyze_source(code_lines)
            duration = time.perf_counter() - start_time
            log_performance("complexity analysis", duration)

            CommandHandlers.render(options, result, lines_arg, duration)

            if output_path:
                save_json(output_path, result.to_dict())
                if options.output_format != OUTPUT_JSON:
                    print_success(f"Results written to {output_path}")

            return result

    @staticmethod
    @logged_operation("classes_command")
    def handle_classes():
        """Handle the classes command."""
        print_complexity_classes()
