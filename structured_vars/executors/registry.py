"""Handler registry executor keyed by configuration type names."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from typing_extensions import override

from .protocol import Executor


if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


logger = logging.getLogger(__name__)


def render_text(parameters: dict[str, Any]) -> Any:
    """Return the ``value`` parameter unchanged, or an empty string."""
    return parameters.get("value", "")


class RegistryExecutor(Executor):
    """Executor that dispatches sub-tasks to handlers by type name.

    The type name of a sub-task is the configuration value stored under its
    key, the way ``{"searchText": "TEXT", "searchText.": {...}}`` declares a
    ``TEXT`` object. Keys without such a sibling use the key itself as the
    type name.
    """

    def __init__(
        self,
        configuration: Mapping[str, Any] | None = None,
        handlers: Mapping[str, Callable[[dict[str, Any]], Any]] | None = None,
    ) -> None:
        super().__init__()
        self._configuration: Mapping[str, Any] = configuration if configuration is not None else {}
        self._handlers: dict[str, Callable[[dict[str, Any]], Any]] = {"TEXT": render_text}
        for name, handler in (handlers or {}).items():
            self.register(name, handler)

    def register(self, name: str, handler: Callable[[dict[str, Any]], Any]) -> None:
        """Add or replace the handler for a type name."""
        if not name:
            msg = "handler name must not be empty"
            raise ValueError(msg)
        self._handlers[name] = handler

    def type_name(self, key: str) -> str:
        """Return the type name declared for key."""
        declared = self._configuration.get(key)
        if isinstance(declared, str) and declared:
            return declared
        return key

    @override
    def execute(self, key: str, parameters: dict[str, Any]) -> Any:
        """Run the handler registered for the type of key."""
        name = self.type_name(key)
        handler = self._handlers.get(name)
        if handler is None:
            logger.warning("No handler registered for %r (sub-task %r)", name, key)
            return None
        logger.debug("Executing %r as %r", key, name)
        return handler(parameters)
