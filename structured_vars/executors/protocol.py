"""Executor interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Executor(ABC):
    """Resolve and run the unit behind a sub-task configuration key."""

    @abstractmethod
    def execute(self, key: str, parameters: dict[str, Any]) -> Any:
        """Run the unit registered for key with parameters and return its value."""
