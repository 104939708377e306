"""
Custom gstester exception classes
"""

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class GSTesterException(Exception):
    """Base class for all Exceptions raised within gstester"""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args)

        self.extra_info = kwargs.get("extra_info", None)

    def __reduce__(self) -> tuple[Any, tuple[Any]]:
        return (self.__class__, (self.args[0],))


class ConfigurationError(GSTesterException):
    """Improper Configuration encountered like:
    * An environment variable referenced in config is not set
    * An unknown naming style
    """


class IncorrectFieldCount(GSTesterException):
    """The unit under test does not manage exactly one field.

    Raised before any test double is built.
    """

    def __init__(
        self, message: str, unit: Optional[type] = None, fields: tuple = (), **kwargs: Any
    ) -> None:
        super().__init__(message, **kwargs)

        self.unit = unit
        self.fields = tuple(fields)


class ConventionViolation(GSTesterException, AssertionError):
    """An accessor did not behave according to the getter-setter convention.

    Subclasses `AssertionError`, so test runners report it as a failure
    rather than an error.
    """

    _MISSING = object()

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        expected: Any = _MISSING,
        actual: Any = _MISSING,
        **kwargs: Any,
    ) -> None:
        logger.debug(f"Convention violated:: {message}")

        super().__init__(message, **kwargs)

        self.operation = operation
        self.expected = None if expected is self._MISSING else expected
        self.actual = None if actual is self._MISSING else actual
        self.has_comparison = expected is not self._MISSING


class IncompatibleUnitError(ConventionViolation):
    """Unit cannot be combined with the given interface"""

    def __init__(self, message: str, missing: tuple = (), **kwargs: Any) -> None:
        super().__init__(message, **kwargs)

        self.missing = tuple(missing)
