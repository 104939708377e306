"""Derive accessor method names from a field name"""

from dataclasses import dataclass
from enum import Enum

from inflection import camelize, underscore

from gstester.exceptions import ConfigurationError


class NamingStyle(Enum):
    SNAKE = "snake"
    CAMEL = "camel"


@dataclass(frozen=True)
class AccessorNames:
    """Names of the accessor methods for one managed field"""

    field: str
    setter: str
    getter: str
    has: str
    get_default: str
    has_default: str


def naming_style(value) -> NamingStyle:
    if isinstance(value, NamingStyle):
        return value

    try:
        return NamingStyle(str(value).lower())
    except ValueError:
        choices = ", ".join(style.value for style in NamingStyle)
        raise ConfigurationError(
            f"Unknown naming style `{value}`. Choose one of: {choices}"
        )


def derive_accessor_names(field: str, style=NamingStyle.SNAKE) -> AccessorNames:
    """Build accessor names for `field`.

    Examples::

        >>> derive_accessor_names("first_name").get_default
        "get_default_first_name"
        >>> derive_accessor_names("first_name", NamingStyle.CAMEL).get_default
        "getDefaultFirstName"

    In camel style every underscore-separated part is capitalized, so a
    snake_case field such as `first_name` yields `setFirstName`, not
    `setFirst_name`. camelCase fields (`firstName`) keep their casing past
    the first letter.
    """
    style = naming_style(style)

    if style is NamingStyle.CAMEL:
        suffix = camelize(field)
        return AccessorNames(
            field=field,
            setter=f"set{suffix}",
            getter=f"get{suffix}",
            has=f"has{suffix}",
            get_default=f"getDefault{suffix}",
            has_default=f"hasDefault{suffix}",
        )

    suffix = underscore(field)
    return AccessorNames(
        field=field,
        setter=f"set_{suffix}",
        getter=f"get_{suffix}",
        has=f"has_{suffix}",
        get_default=f"get_default_{suffix}",
        has_default=f"has_default_{suffix}",
    )
