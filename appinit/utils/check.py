"""Argument guards used across startup code."""
from typing import Optional, TypeVar

T = TypeVar("T")


def not_null(value: Optional[T], parameter_name: str) -> T:
    """
    Ensure a value is not None.

    Args:
        value: Value to check
        parameter_name: Name reported in the error message

    Returns:
        The same value

    Raises:
        ValueError: If value is None
    """
    if value is None:
        raise ValueError(f"{parameter_name} can not be None!")
    return value


def not_null_or_empty(value: Optional[str], parameter_name: str) -> str:
    """Ensure a string is neither None nor empty."""
    if value is None or value == "":
        raise ValueError(f"{parameter_name} can not be None or empty!")
    return value
