"""Structured variables processor: sub-task expansion plus path folding."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from structured_vars.access import ObjectAccessor
from structured_vars.executors import RegistryExecutor
from structured_vars.key_mapping import KeyMapper, fold_nested


if TYPE_CHECKING:
    from collections.abc import Mapping, MutableMapping

    from structured_vars.access import PropertyAccessor
    from structured_vars.executors import Executor


logger = logging.getLogger(__name__)


class StructuredVariablesProcessor:
    """Turn flat dotted variables into nested dictionaries.

    ``process`` first runs every configuration entry that carries an alias
    attribute (``as`` by default) through the executor and stores the result
    under the alias path, then folds all dotted keys into nested dicts::

        >>> processor = StructuredVariablesProcessor()
        >>> processor.fold({"foo.bar": 1, "foo.baz": 2, "x": 3})
        {'foo': {'bar': 1, 'baz': 2}, 'x': 3}
    """

    def __init__(self, sep: str = ".", alias_key: str = "as", accessor: PropertyAccessor | None = None) -> None:
        super().__init__()
        if not alias_key:
            msg = "alias_key must not be empty"
            raise ValueError(msg)
        if alias_key == sep:
            msg = "alias_key must differ from separator"
            raise ValueError(msg)

        self._mapper = KeyMapper(sep=sep)
        self._alias_key = alias_key
        self._accessor = accessor if accessor is not None else ObjectAccessor()

    @property
    def sep(self) -> str:
        return self._mapper.sep

    @property
    def alias_key(self) -> str:
        return self._alias_key

    def expand(
        self,
        configuration: Mapping[str, Any],
        flat: MutableMapping[str, Any],
        executor: Executor,
    ) -> MutableMapping[str, Any]:
        """Execute aliased sub-tasks and store their results in flat.

        Entries that are not dicts, or whose alias attribute is missing or
        None, are left alone. ``configuration`` is never modified; ``flat`` is updated in place
        and returned.
        """
        for key, entry in configuration.items():
            if not isinstance(entry, dict) or entry.get(self._alias_key) is None:
                continue
            parameters = dict(entry)
            target = parameters.pop(self._alias_key)
            flat[str(target)] = executor.execute(self._mapper.trim(str(key)), parameters)
            logger.debug("Expanded sub-task %r into %r", key, target)
        return flat

    def fold(self, flat: Mapping[str, Any]) -> dict[str, Any]:
        """Fold dotted keys of flat into a new nested dict."""
        return fold_nested(flat, mapper=self._mapper, accessor=self._accessor)

    def process(
        self,
        flat: Mapping[str, Any],
        configuration: Mapping[str, Any] | None = None,
        executor: Executor | None = None,
    ) -> dict[str, Any]:
        """Expand sub-tasks into a copy of flat and return the folded result.

        Without an explicit executor, sub-tasks run through a
        :class:`RegistryExecutor` over ``configuration``.
        """
        variables = dict(flat)
        if configuration:
            if executor is None:
                executor = RegistryExecutor(configuration)
            self.expand(configuration, variables, executor)
        return self.fold(variables)
