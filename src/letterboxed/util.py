"""Formatting helpers for solver output."""


def ms_str(seconds: float) -> str:
    """Format a short duration in whole milliseconds, e.g. "12ms"."""
    return f"{round(seconds * 1000)}ms"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"
