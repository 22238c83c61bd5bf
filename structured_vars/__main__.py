"""Interface for ``python -m structured_vars``."""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from ._version import version
from .processors import StructuredVariablesProcessor


if TYPE_CHECKING:
    from collections.abc import Sequence


__all__ = ["load_mapping", "main", "setup_logging"]

_YAML_SUFFIXES = {".yaml", ".yml"}


def setup_logging(level: str) -> None:
    """Send log records to stderr at the requested level."""
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-5s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def load_mapping(path: Path) -> dict[str, Any]:
    """Read a JSON or YAML document whose top level is a mapping."""
    text = path.read_text(encoding="utf-8")
    data = yaml.safe_load(text) if path.suffix.lower() in _YAML_SUFFIXES else json.loads(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"top level of {path} must be a mapping"
        raise ValueError(msg)
    return {str(key): value for key, value in data.items()}


def main(args: Sequence[str] | None = None) -> None:
    """Fold a flat variables file into nested JSON on stdout."""
    parser = ArgumentParser(prog="structured_vars", description=main.__doc__)
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("--variables", type=Path, help="flat variables (JSON or YAML)")
    _ = parser.add_argument("--config", type=Path, help="sub-task configuration (JSON or YAML)")
    _ = parser.add_argument("--sep", default=".", help="path separator (default: %(default)s)")
    _ = parser.add_argument("--alias-key", default="as", help="sub-task target attribute (default: %(default)s)")
    _ = parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: %(default)s)")
    _ = parser.add_argument("--log-level", default="WARNING", help="logging level (default: %(default)s)")
    options = parser.parse_args(args)

    setup_logging(options.log_level)

    try:
        variables = load_mapping(options.variables) if options.variables else {}
        configuration = load_mapping(options.config) if options.config else {}
        processor = StructuredVariablesProcessor(sep=options.sep, alias_key=options.alias_key)
    except (OSError, ValueError, yaml.YAMLError) as error:
        parser.error(str(error))

    nested = processor.process(variables, configuration)
    print(json.dumps(nested, indent=options.indent, default=str))


if __name__ == "__main__":
    main()
