"""Holder for objects that are created after the container is configured."""
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ObjectAccessor(Generic[T]):
    """
    Mutable box registered as a singleton.

    Register it as ``ObjectAccessor[SomeType]`` while configuring services and
    assign ``value`` once the object exists (e.g. the Flask app).
    """

    def __init__(self, value: Optional[T] = None):
        self.value = value

    def __repr__(self) -> str:
        return f"ObjectAccessor(value={self.value!r})"
