"""Nested structure folding from flat dotted keys."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from structured_vars.access import NOT_ACCESSIBLE, ObjectAccessor, is_scalar

from .mapper import KeyMapper


if TYPE_CHECKING:
    from collections.abc import Mapping

    from structured_vars.access import PropertyAccessor


logger = logging.getLogger(__name__)


def _resolve(accessor: PropertyAccessor, owner: Any, segment: str) -> Any:
    value = accessor.get_property(owner, segment)
    if value is NOT_ACCESSIBLE or is_scalar(value):
        return NOT_ACCESSIBLE
    return value


def _replace(accessor: PropertyAccessor, owner: Any, segment: str, key: str) -> dict[str, Any]:
    container: dict[str, Any] = {}
    if isinstance(owner, dict):
        owner[segment] = container
    elif not accessor.set_property(owner, segment, container):
        logger.debug("Detached container at %r while folding %r", segment, key)
    return container


def _advance(accessor: PropertyAccessor, cursor: Any, segment: str, key: str) -> Any:
    if isinstance(cursor, dict):
        if segment not in cursor:
            cursor[segment] = {}
            return cursor[segment]
        if isinstance(cursor[segment], dict):
            return cursor[segment]

    # Non-container entry, or the cursor is an object: go through the accessor.
    # A property returning a copy of its data detaches every later write.
    resolved = _resolve(accessor, cursor, segment)
    if resolved is NOT_ACCESSIBLE:
        logger.debug("Replacing inaccessible %r while folding %r", segment, key)
        return _replace(accessor, cursor, segment, key)
    return resolved


def fold_nested(
    flat: Mapping[str, Any],
    *,
    mapper: KeyMapper | None = None,
    accessor: PropertyAccessor | None = None,
) -> dict[str, Any]:
    """Fold a flat mapping with dotted keys into nested dictionaries.

    Keys without a separator are copied as they are. Dotted keys are split into
    path segments and a leaf name; missing intermediate levels are created as
    dicts and existing dicts are extended in place, so sibling keys sharing a
    prefix accumulate under the same container. Non-dict intermediates and the
    final leaf write go through ``accessor``. Nothing is raised for paths that
    cannot be written; such values are dropped.
    """
    mapper = mapper if mapper is not None else KeyMapper()
    accessor = accessor if accessor is not None else ObjectAccessor()

    nested: dict[str, Any] = {}
    for key, value in flat.items():
        if not isinstance(key, str) or not mapper.is_nested(key):
            nested[key] = value
            continue

        segments, leaf = mapper.split(key)
        cursor: Any = nested
        for segment in segments:
            cursor = _advance(accessor, cursor, segment, key)

        if not accessor.set_property(cursor, leaf, value):
            logger.debug("Dropped value for %r: %r is not writable", key, leaf)
    return nested
