"""Validation utilities for command-line arguments."""

from typing import Optional


def parse_int(value: str, name: str) -> int:
    """
    Parse a decimal integer argument.

    Raises:
        ValueError: If the value is not an integer.
    """
    try:
        return int(value.strip(), 10)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def parse_dop_flag(value: Optional[str]) -> bool:
    """Any non-zero integer enables DoP; a missing flag disables it."""
    if value is None:
        return False
    return parse_int(value, "dop") != 0
