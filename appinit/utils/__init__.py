"""Utility helpers."""
from appinit.utils.check import not_null, not_null_or_empty

__all__ = ["not_null", "not_null_or_empty"]
