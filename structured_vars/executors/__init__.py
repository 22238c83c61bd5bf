"""Sub-task executor contracts and implementations."""

from .protocol import Executor
from .registry import RegistryExecutor, render_text


__all__ = ["Executor", "RegistryExecutor", "render_text"]
