"""Discover the field managed by a getter-setter mixin.

A mixin can declare its field explicitly::

    class PersonMixin:
        __managed_fields__ = "name"

or simply annotate it on the class body::

    class PersonMixin:
        name: Optional[str] = None

Only annotations declared on the class itself count; inherited ones belong to
some other unit.
"""

import inspect
import logging
import typing

from gstester.exceptions import IncorrectFieldCount
from gstester.utils import fqn

logger = logging.getLogger(__name__)

_MANAGED_FIELDS = "__managed_fields__"


def _is_class_var(annotation) -> bool:
    if annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar:
        return True

    # String annotations, e.g. under `from __future__ import annotations`
    return isinstance(annotation, str) and (
        annotation.startswith("ClassVar") or annotation.startswith("typing.ClassVar")
    )


def declared_fields(unit: type) -> tuple[str, ...]:
    """Return the names of the fields `unit` declares, in declaration order"""
    if not isinstance(unit, type):
        raise TypeError(f"must be called with a class, not {type(unit).__name__}")

    namespace = vars(unit)

    if _MANAGED_FIELDS in namespace:
        declared = namespace[_MANAGED_FIELDS]
        if isinstance(declared, str):
            return (declared,)
        return tuple(declared)

    annotations = inspect.get_annotations(unit)
    return tuple(
        name
        for name, annotation in annotations.items()
        if not (name.startswith("__") and name.endswith("__"))
        and not _is_class_var(annotation)
    )


def field_name(attribute_name: str) -> str:
    """Return the public name of a field, e.g. `_name` -> `name`"""
    return attribute_name.lstrip("_")


def managed_field(unit: type) -> str:
    """Return the public name of the single field managed by `unit`.

    Raises:
        IncorrectFieldCount: if `unit` declares zero or several fields
    """
    fields = declared_fields(unit)
    logger.debug(f"Fields declared on {fqn(unit)}: {fields}")

    if len(fields) != 1:
        raise IncorrectFieldCount(
            f"Unit {fqn(unit)} contains incorrect fields amount ({len(fields)}). "
            "This helper can only test a single field!",
            unit=unit,
            fields=fields,
        )

    return field_name(fields[0])
