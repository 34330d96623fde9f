import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, TextIO, Union

from complexity_cli.core.constants import DEFAULT_SENTINEL
from complexity_cli.core.exceptions import ExportError, InputError
from complexity_cli.core.logging import log_file_operation, log_warning


def read_source_lines(stream: Iterable[str], sentinel: str = DEFAULT_SENTINEL) -> List[str]:
    """
    Collect lines of code from a stream until the sentinel line or end of stream.

    The sentinel must match a whole line exactly; it is not included in the result.
    Args:
        stream: Any iterable of text lines (file object, sys.stdin, list)
        sentinel: Line that terminates input
    Returns:
        Lines without their trailing newline characters
    """
    lines = []
    for raw_line in stream:
        line = raw_line.rstrip("\r\n")
        if line == sentinel:
            break
        lines.append(line)
    return lines


def load_source_file(file_path: Union[str, Path], sentinel: str = DEFAULT_SENTINEL) -> List[str]:
    """
    Read lines of code from a file.
    Args:
        file_path: Path to the source file
        sentinel: Line that terminates input early
    Returns:
        Lines of the file up to the sentinel
    Raises:
        InputError: If the file is missing, a directory, or not valid UTF-8
    """
    path = Path(file_path)
    log_file_operation("read", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return read_source_lines(f, sentinel)
    except FileNotFoundError as e:
        raise InputError(f"Source file not found: {path}") from e
    except IsADirectoryError as e:
        raise InputError(f"Expected a file but got a directory: {path}") from e
    except UnicodeDecodeError as e:
        raise InputError(f"Source file is not valid UTF-8 text: {path}") from e


def read_input(stream: TextIO, sentinel: str = DEFAULT_SENTINEL) -> List[str]:
    """Read lines of code from an interactive or piped stream."""
    log_file_operation("read", Path(getattr(stream, "name", "<stdin>")))
    return read_source_lines(stream, sentinel)


def save_json(file_path: Union[str, Path], data: Union[List, Dict]) -> None:
    """
    Save data to a JSON file.
    Args:
        file_path: Path to save JSON file
        data: Data to save
    Raises:
        ExportError: If file cannot be written
    """
    log_file_operation("write", Path(file_path))
    try:
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise ExportError(f"Could not write JSON to {file_path}: {e}") from e


def parse_lines_arg(lines_arg: Optional[str], total_lines: int) -> Set[int]:
    """
    Parse a comma-separated string of numbers/ranges into a set of line numbers.

    Examples:
        - "1,3,5-7" -> {1, 3, 5, 6, 7}
        - None -> {1, 2, ..., total_lines}
    Args:
        lines_arg: Comma-separated string of line numbers/ranges
        total_lines: Total number of analyzed lines
    Returns:
        Set of line numbers to display
    """
    if not lines_arg:
        return set(range(1, total_lines + 1))

    selected_lines = set()
    parts = lines_arg.split(",")

    for part in parts:
        part = part.strip()
        if not part:
            continue

        try:
            if "-" in part:
                start, end = map(int, part.split("-"))
                if start <= 0 or end <= 0 or start > end:
                    log_warning(f"Invalid range '{part}' in lines argument. Skipping.")
                    continue
                selected_lines.update(range(start, end + 1))
            else:
                line_num = int(part)
                if line_num <= 0:
                    log_warning(
                        f"Invalid line number '{part}' in lines argument. Skipping."
                    )
                    continue
                selected_lines.add(line_num)
        except ValueError:
            log_warning(f"Invalid format '{part}' in lines argument. Skipping.")
            continue

    # Filter out lines that are out of the valid range
    valid_selected_lines = {line for line in selected_lines if 1 <= line <= total_lines}
    if len(valid_selected_lines) != len(selected_lines):
        log_warning(
            f"Some selected lines are outside the valid range (1-{total_lines})."
        )

    return valid_selected_lines
