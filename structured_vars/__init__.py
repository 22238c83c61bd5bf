"""structured-vars - fold dotted flat variables into nested structures"""

from ._version import version as __version__
from .access import NOT_ACCESSIBLE, ObjectAccessor, PropertyAccessible, PropertyAccessor
from .executors import Executor, RegistryExecutor
from .key_mapping import KeyMapper, fold_nested
from .processors import StructuredVariablesProcessor


__all__ = [
    "NOT_ACCESSIBLE",
    "Executor",
    "KeyMapper",
    "ObjectAccessor",
    "PropertyAccessible",
    "PropertyAccessor",
    "RegistryExecutor",
    "StructuredVariablesProcessor",
    "__version__",
    "fold_nested",
]
