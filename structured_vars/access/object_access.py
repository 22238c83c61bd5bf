"""Default property accessor for mappings, sequences and plain objects."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any

from typing_extensions import override

from .protocol import NOT_ACCESSIBLE, PropertyAccessible, PropertyAccessor, is_scalar


def _index(subject: Sequence[Any], name: str) -> int | None:
    if not name.isdecimal():
        return None
    index = int(name)
    if index >= len(subject):
        return None
    return index


def _is_public(name: str) -> bool:
    return bool(name) and not name.startswith("_")


class ObjectAccessor(PropertyAccessor):
    """Resolve properties by item for mappings and by attribute for objects.

    Lookup order for both reads and writes:

    1. scalars are never accessible,
    2. objects implementing :class:`PropertyAccessible` answer for themselves,
    3. mappings use item access, sequences use decimal indices,
    4. anything else uses public attributes (no leading underscore).
    """

    @override
    def get_property(self, subject: Any, name: str) -> Any:
        """Return the named property of subject, or ``NOT_ACCESSIBLE``."""
        if is_scalar(subject):
            return NOT_ACCESSIBLE
        if isinstance(subject, PropertyAccessible):
            return subject.get_property(name)
        if isinstance(subject, Mapping):
            return subject[name] if name in subject else NOT_ACCESSIBLE
        if isinstance(subject, Sequence):
            index = _index(subject, name)
            return NOT_ACCESSIBLE if index is None else subject[index]
        if not _is_public(name):
            return NOT_ACCESSIBLE
        try:
            return getattr(subject, name)
        except AttributeError:
            return NOT_ACCESSIBLE

    @override
    def set_property(self, subject: Any, name: str, value: Any) -> bool:
        """Set the named property of subject; return False when not accessible."""
        if is_scalar(subject):
            return False
        if isinstance(subject, PropertyAccessible):
            return subject.set_property(name, value)
        if isinstance(subject, MutableMapping):
            subject[name] = value
            return True
        if isinstance(subject, MutableSequence):
            index = _index(subject, name)
            if index is None:
                return False
            subject[index] = value
            return True
        if isinstance(subject, Mapping | Sequence) or not _is_public(name):
            return False
        try:
            setattr(subject, name, value)
        except (AttributeError, TypeError):
            return False
        return True
