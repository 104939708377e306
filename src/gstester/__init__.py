__version__ = "0.1.0"

from .config import Config
from .doubles import make_double
from .exceptions import (
    ConfigurationError,
    ConventionViolation,
    GSTesterException,
    IncompatibleUnitError,
    IncorrectFieldCount,
)
from .naming import AccessorNames, NamingStyle, derive_accessor_names
from .reflection import managed_field
from .utils import get_version
from .verifier import GetterSetterVerifier, assert_compatible, verify

__all__ = [
    "AccessorNames",
    "assert_compatible",
    "Config",
    "ConfigurationError",
    "ConventionViolation",
    "derive_accessor_names",
    "GetterSetterVerifier",
    "get_version",
    "GSTesterException",
    "IncompatibleUnitError",
    "IncorrectFieldCount",
    "make_double",
    "managed_field",
    "NamingStyle",
    "verify",
]
