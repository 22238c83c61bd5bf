"""Key mapping utilities for separator-delimited variable names."""

from __future__ import annotations


class KeyMapper:
    """Map between flat dotted keys and nested path segments."""

    def __init__(self, sep: str = ".") -> None:
        super().__init__()
        if not sep:
            msg = "sep must not be empty"
            raise ValueError(msg)
        self.sep = sep

    def is_nested(self, key: str) -> bool:
        """Return True when key contains the separator."""
        return self.sep in key

    def split(self, key: str) -> tuple[tuple[str, ...], str]:
        """Split a dotted key into its path segments and leaf name.

        No segment validation happens here: ``"a..b"`` yields an empty path
        segment, exactly as a plain ``str.split`` would.
        """
        if not self.is_nested(key):
            msg = f"key does not contain separator: {key}"
            raise ValueError(msg)
        *segments, leaf = key.split(self.sep)
        return tuple(segments), leaf

    def join(self, *parts: str) -> str:
        """Build a dotted key from one or more path parts."""
        if not parts:
            msg = "at least one key part is required"
            raise ValueError(msg)
        return self.sep.join(parts)

    def trim(self, key: str) -> str:
        """Strip whole leading and trailing separators from key."""
        while key.startswith(self.sep):
            key = key.removeprefix(self.sep)
        while key.endswith(self.sep):
            key = key.removesuffix(self.sep)
        return key
