"""Dotted key splitting and nested folding utilities."""

from .mapper import KeyMapper
from .nested import fold_nested


__all__ = ["KeyMapper", "fold_nested"]
