"""Generic property access contracts and implementations."""

from .object_access import ObjectAccessor
from .protocol import NOT_ACCESSIBLE, NotAccessible, PropertyAccessible, PropertyAccessor, is_scalar


__all__ = ["NOT_ACCESSIBLE", "NotAccessible", "ObjectAccessor", "PropertyAccessible", "PropertyAccessor", "is_scalar"]
