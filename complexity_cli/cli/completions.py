"""
Autocompletion functions for Complexity CLI.
"""

from typing import List

from complexity_cli.core.constants import OUTPUT_FORMATS


class Completions:
    """Autocompletion provider for Complexity CLI."""

    @staticmethod
    def output_formats(incomplete: str) -> List[str]:
        """Complete output format names."""
        return [fmt for fmt in OUTPUT_FORMATS if fmt.startswith(incomplete.lower())]
