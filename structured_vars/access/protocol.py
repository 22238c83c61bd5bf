"""Property accessor interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Final, Protocol, final, runtime_checkable


_SCALAR_TYPES: Final = (str, bytes, bytearray, bool, int, float, complex, type(None))


@final
class NotAccessible:
    """Marker returned when a property cannot be read."""

    _instance: NotAccessible | None = None

    def __new__(cls) -> NotAccessible:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_ACCESSIBLE"


NOT_ACCESSIBLE: Final = NotAccessible()


def is_scalar(value: Any) -> bool:
    """Return True for values that cannot carry properties."""
    return isinstance(value, _SCALAR_TYPES)


@runtime_checkable
class PropertyAccessible(Protocol):
    """Objects that resolve their own properties by name."""

    def get_property(self, name: str) -> Any:
        """Return the property value, or ``NOT_ACCESSIBLE``."""
        ...

    def set_property(self, name: str, value: Any) -> bool:
        """Store the property value and report whether it was accepted."""
        ...


class PropertyAccessor(ABC):
    """Generic get/set capability over arbitrary subjects."""

    @abstractmethod
    def get_property(self, subject: Any, name: str) -> Any:
        """Return the named property of subject, or ``NOT_ACCESSIBLE``."""

    @abstractmethod
    def set_property(self, subject: Any, name: str, value: Any) -> bool:
        """Set the named property of subject; return False when not accessible."""
