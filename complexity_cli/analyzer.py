"""
Heuristic, line-based time complexity analyzer for brace-delimited source code.

The analyzer never parses the code. It scans the lines once, keeping a stack
of open blocks and a loop nesting counter, and classifies every line by
matching simple patterns against its text.
"""

import re
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from complexity_cli.core.logging import log_debug


class ComplexityClass(Enum):
    """Complexity classes a line (or a whole snippet) can be assigned."""

    CONSTANT = "O(1)"
    LINEAR = "O(n)"
    QUADRATIC = "O(n²)"
    CUBIC = "O(n³)"
    LINEARITHMIC = "O(n log n)"
    UNKNOWN = "Unknown"

    @property
    def notation(self) -> str:
        return self.value


class BlockTag(Enum):
    LOOP = "loop"
    BLOCK = "block"


@dataclass(frozen=True)
class LineRecord:
    """Classification of a single input line."""

    line_number: int
    text: str
    complexity: ComplexityClass
    reason: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "line_number": self.line_number,
            "text": self.text,
            "complexity": self.complexity.name,
            "notation": self.complexity.notation,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Everything a single analysis run produces."""

    records: Tuple[LineRecord, ...]
    overall: ComplexityClass
    max_nesting_depth: int
    function_definitions: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        return {
            "overall": self.overall.name,
            "notation": self.overall.notation,
            "max_nesting_depth": self.max_nesting_depth,
            "function_definitions": dict(self.function_definitions),
            "lines": [record.to_dict() for record in self.records],
        }


@dataclass
class ScanState:
    """Mutable bookkeeping for one pass over the input."""

    current_function: str = ""
    nesting_depth: int = 0
    max_nesting_depth: int = 0
    block_stack: List[BlockTag] = field(default_factory=list)


# Patterns
LOOP_PATTERN = re.compile(r"\b(for|while)\s*\(")
FUNCTION_SIGNATURE_PATTERN = re.compile(
    r"\b([a-zA-Z_][a-zA-Z0-9_]*)\s*\([^)]*\)\s*(?:const)?\s*[{;]"
)
FUNCTION_OPEN_PATTERN = re.compile(
    r"\b([a-zA-Z_][a-zA-Z0-9_]*)\s*\([^)]*\)\s*(?:const)?\s*\{"
)
CALL_STATEMENT_PATTERN = re.compile(r"\b[a-zA-Z_][a-zA-Z0-9_]*\s*\([^)]*\)\s*;")
COMMENT_MARKER = "//"

# Aggregate table, indexed by maximum loop nesting depth.
# Depth 4 and above falls through to LINEARITHMIC.
DEPTH_TABLE = (
    ComplexityClass.CONSTANT,
    ComplexityClass.LINEAR,
    ComplexityClass.QUADRATIC,
    ComplexityClass.CUBIC,
)


def classify_depth(depth: int) -> ComplexityClass:
    """Map a loop nesting depth onto the aggregate complexity table."""
    if depth < len(DEPTH_TABLE):
        return DEPTH_TABLE[max(depth, 0)]
    return ComplexityClass.LINEARITHMIC


def is_comment(line: str) -> bool:
    """Check whether a trimmed line is blank or a single-line comment."""
    return not line or line.startswith(COMMENT_MARKER)


def find_opened_function(line: str) -> Optional[str]:
    """Return the name of the function whose body a line opens, if any."""
    match = FUNCTION_OPEN_PATTERN.search(line)
    return match.group(1) if match else None


def get_complexity_reason(line: str, complexity: ComplexityClass) -> str:
    """Get a human-readable explanation for a line's complexity."""
    if complexity is ComplexityClass.CONSTANT:
        return "Constant time operation (no loops)"
    if complexity is ComplexityClass.LINEAR:
        if LOOP_PATTERN.search(line):
            return "Single loop running n times"
        return "Linear time operation"
    if complexity is ComplexityClass.QUADRATIC:
        return "Nested loops (n × n iterations)"
    if complexity is ComplexityClass.CUBIC:
        return "Triple nested loops (n × n × n iterations)"
    if complexity is ComplexityClass.LINEARITHMIC:
        return "Divide-and-conquer or recursive algorithm"
    return "Cannot determine complexity of called function"


class ComplexityAnalyzer:
    """
    Estimates the time complexity of each line of a code snippet.

    Every call to analyze() starts from a fresh ScanState, so one analyzer can
    be run repeatedly and always yields the same records for the same lines.
    """

    def __init__(self, code_lines: Iterable[str]):
        self.code_lines: List[str] = list(code_lines)
        self.function_definitions: Counter = Counter()
        self._state = ScanState()

    @property
    def nesting_depth(self) -> int:
        return self._state.nesting_depth

    @property
    def max_nesting_depth(self) -> int:
        return self._state.max_nesting_depth

    def track_function_definitions(self) -> Counter:
        """Count definition- or declaration-like lines per function name."""
        definitions: Counter = Counter()
        for line in self.code_lines:
            for match in FUNCTION_SIGNATURE_PATTERN.finditer(line):
                definitions[match.group(1)] += 1
        return definitions

    def is_recursive(self, line: str) -> bool:
        """Check whether a line calls the currently open function."""
        func_name = self._state.current_function
        if not func_name or func_name not in self.function_definitions:
            return False
        return re.search(r"\b" + re.escape(func_name) + r"\s*\(", line) is not None

    def analyze_line(self, line: str) -> ComplexityClass:
        """
        Classify one trimmed line.

        Loop bookkeeping for the line must already have been applied, so the
        depth at which this loop was opened is nesting_depth - 1.
        """
        if is_comment(line):
            return ComplexityClass.CONSTANT

        if LOOP_PATTERN.search(line):
            opened_at = self._state.nesting_depth - 1
            if opened_at <= 0:
                return ComplexityClass.LINEAR
            if opened_at == 1:
                return ComplexityClass.QUADRATIC
            return ComplexityClass.CUBIC

        if self.is_recursive(line):
            return ComplexityClass.LINEARITHMIC

        if CALL_STATEMENT_PATTERN.search(line):
            return ComplexityClass.UNKNOWN

        return ComplexityClass.CONSTANT

    def _open_blocks(self, line: str) -> None:
        state = self._state
        if not is_comment(line) and LOOP_PATTERN.search(line):
            state.block_stack.append(BlockTag.LOOP)
            state.nesting_depth += 1
            state.max_nesting_depth = max(state.max_nesting_depth, state.nesting_depth)
        elif "{" in line:
            state.block_stack.append(BlockTag.BLOCK)

    def _close_blocks(self, line: str) -> None:
        state = self._state
        if "}" in line and state.block_stack:
            if state.block_stack.pop() is BlockTag.LOOP:
                state.nesting_depth -= 1

    def analyze(self) -> List[LineRecord]:
        """Analyze every line, returning one record per input line."""
        self._state = ScanState()
        self.function_definitions = self.track_function_definitions()
        log_debug(f"Discovered functions: {dict(self.function_definitions) or 'none'}")

        results: List[LineRecord] = []
        for line_number, raw_line in enumerate(self.code_lines, start=1):
            line = raw_line.strip()

            name = find_opened_function(line)
            if name:
                self._state.current_function = name

            self._open_blocks(line)

            complexity = self.analyze_line(line)
            results.append(
                LineRecord(
                    line_number=line_number,
                    text=line,
                    complexity=complexity,
                    reason=get_complexity_reason(line, complexity),
                )
            )

            self._close_blocks(line)

        if self._state.block_stack:
            log_debug(f"{len(self._state.block_stack)} block(s) left open at end of input")
        log_debug(f"Maximum loop nesting depth: {self._state.max_nesting_depth}")
        return results

    def estimate_overall_complexity(self) -> ComplexityClass:
        """Estimate the snippet's complexity from the deepest loop nesting seen."""
        return classify_depth(self._state.max_nesting_depth)


def analyze_source(code_lines: Iterable[str]) -> AnalysisResult:
    """Run a complete analysis over a sequence of lines."""
    analyzer = ComplexityAnalyzer(code_lines)
    records = analyzer.analyze()
    return AnalysisResult(
        records=tuple(records),
        overall=analyzer.estimate_overall_complexity(),
        max_nesting_depth=analyzer.max_nesting_depth,
        function_definitions=dict(analyzer.function_definitions),
    )
