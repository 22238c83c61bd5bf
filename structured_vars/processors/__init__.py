"""Variable processors built on key mapping and sub-task execution."""

from .structured import StructuredVariablesProcessor


__all__ = ["StructuredVariablesProcessor"]
