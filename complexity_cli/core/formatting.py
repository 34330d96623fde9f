def format_time(seconds: float) -> str:
    """
    Format time in the most appropriate unit:
    - <1μs: ns
    - <1ms: μs
    - <1s: ms
    - >=1s: s
    Args:
        seconds: Time in seconds
    Returns:
        Formatted time string with unit
    """
    if seconds < 1e-6:
        return f"{seconds * 1e9:.2f} ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.2f} μs"
    elif seconds < 1:
        return f"{seconds * 1000:.2f} ms"
    else:
        return f"{seconds:.6f} s"


def truncate_code(code: str, max_width: int) -> str:
    """
    Shorten a line of code to fit a column, marking the cut with an ellipsis.
    Args:
        code: Line of code
        max_width: Maximum number of characters to keep, ellipsis included
    Returns:
        The original line, or its truncated form
    """
    if len(code) <= max_width:
        return code
    return code[: max(max_width - 1, 0)] + "…"


def pluralize(count: int, noun: str) -> str:
    """Format a count with a naively pluralized noun ("1 line", "3 lines")."""
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"
