"""Utility module for gstester

Definitions/declaractions in this module should be independent of other modules,
to the maximum extent possible.
"""

from importlib import metadata as importlib_metadata
from typing import Any

# Values compared by type and value instead of identity
SCALAR_TYPES = (type(None), bool, int, float, complex, str, bytes)


def get_version() -> str:
    return importlib_metadata.version("gstester")


def fully_qualified_name(cls) -> str:
    """Return Fully Qualified name along with module"""
    return ".".join([cls.__module__, cls.__qualname__])


fqn = fully_qualified_name


def is_scalar(value: Any) -> bool:
    return isinstance(value, SCALAR_TYPES)


def is_same(expected: Any, actual: Any) -> bool:
    """Check if two values are the same.

    Scalars must match in both type and value, so that `1`, `1.0` and `True`
    are told apart. Everything else must be the very same object.
    """
    if is_scalar(expected):
        return type(expected) is type(actual) and expected == actual

    return expected is actual


def describe(value: Any) -> str:
    """Return a short representation of `value` for trace output.

    Scalars are shown as literals, objects by their class name.
    """
    if is_scalar(value):
        return repr(value)

    return fqn(type(value))
