"""Test doubles for getter-setter mixins.

A double is an instance of a throw-away subclass of the unit. Methods named in
`overrides` are replaced by `mock.Mock` objects returning the canned value,
everything else keeps the unit's real behavior. The unit itself is never
modified.
"""

import logging
from typing import Any, Optional

from mock import Mock

from gstester.exceptions import ConventionViolation
from gstester.utils import fqn

logger = logging.getLogger(__name__)


def double_class(unit: type, overrides: Optional[dict[str, Any]] = None) -> type:
    """Create a subclass of `unit` with `overrides` mocked out.

    Abstract methods of `unit` are mocked too, so that the class can be
    instantiated.
    """
    overrides = overrides or {}

    namespace: dict[str, Any] = {"__module__": unit.__module__}
    for name in getattr(unit, "__abstractmethods__", ()):
        namespace[name] = Mock(name=f"{unit.__name__}.{name}")

    for name, return_value in overrides.items():
        namespace[name] = Mock(name=f"{unit.__name__}.{name}", return_value=return_value)

    return type(f"{unit.__name__}Double", (unit,), namespace)


def make_double(unit: type, overrides: Optional[dict[str, Any]] = None) -> Any:
    """Return a fresh double of `unit`.

    Args:
        unit: The mixin class to wrap
        overrides: Mapping of method name to the value it must return

    Raises:
        ConventionViolation: if the unit cannot be built without arguments
    """
    try:
        cls = double_class(unit, overrides)
        double = cls()
    except TypeError as exc:
        raise ConventionViolation(
            f"Could not construct a double of {fqn(unit)}: {exc}"
        ) from exc

    logger.debug(f"Built {cls.__name__} overriding {sorted(overrides or {})}")
    return double
