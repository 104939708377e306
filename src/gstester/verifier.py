"""Getter-Setter Verifier

Verifies that a mixin managing a single field follows the getter-setter
convention::

    class PersonMixin:
        name: Optional[str] = None

        def set_name(self, name): ...
        def get_name(self): ...              # falls back to get_default_name()
        def has_name(self): ...
        def get_default_name(self): ...      # None unless overridden

Usage::

    from gstester import GetterSetterVerifier

    def test_person_mixin():
        GetterSetterVerifier().verify(PersonMixin, "Alice", "Bob")
"""

import logging
import warnings
from typing import Any, Optional

from typing_extensions import get_protocol_members, is_protocol

from gstester.config import Config, ConfigAttribute
from gstester.doubles import make_double
from gstester.exceptions import ConventionViolation, IncompatibleUnitError
from gstester.naming import AccessorNames, derive_accessor_names
from gstester.reflection import managed_field
from gstester.utils import describe, fqn, is_same
from gstester.utils.logging import configure_logging, is_configured

logger = logging.getLogger(__name__)


class GetterSetterVerifier:
    """Assert that a getter-setter mixin behaves according to convention.

    Configuration can be passed as a `Config` object, as keyword overrides,
    or both (keywords win)::

        GetterSetterVerifier(naming="camel", verbose=True)
    """

    verbose = ConfigAttribute("verbose")
    naming = ConfigAttribute("naming")
    check_has_default = ConfigAttribute("check_has_default")

    def __init__(self, config: Optional[Config] = None, **overrides: Any) -> None:
        base = dict(config) if config is not None else {}
        base.update(overrides)
        self.config = Config.load_from_dict(base)

    ###########################################################
    # Helpers and utilities
    ###########################################################

    def output(self, message: str) -> None:
        """Emit a trace line to stderr, if running in verbose mode"""
        if self.verbose:
            if not is_configured():
                configure_logging()
            logger.info(message)

    def guess_field_name(self, unit: type) -> str:
        """Return the name of the field managed by `unit`"""
        return managed_field(unit)

    def accessor_names(self, unit: type) -> AccessorNames:
        """Return the accessor method names expected on `unit`"""
        return derive_accessor_names(self.guess_field_name(unit), self.naming)

    def make_double(self, unit: type, overrides: Optional[dict[str, Any]] = None):
        return make_double(unit, overrides)

    def _invoke(self, double: Any, method_name: str, *args: Any) -> Any:
        method = getattr(double, method_name, None)
        if method is None or not callable(method):
            raise ConventionViolation(
                f"{type(double).__name__} has no `{method_name}()` method",
                operation=method_name,
            )

        return method(*args)

    def _fail(
        self, fail_message: str, method_name: str, expected: Any, actual: Any
    ) -> None:
        raise ConventionViolation(
            f"{fail_message}: {method_name}() expected {expected!r}, got {actual!r}",
            operation=method_name,
            expected=expected,
            actual=actual,
        )

    ###########################################################
    # Assertions
    ###########################################################

    def verify(
        self, unit: type, value_to_set_and_obtain: Any, custom_default_value: Any
    ) -> None:
        """Assert all accessors of the given getter-setter mixin.

        Invokes every accessor, setting and retrieving `value_to_set_and_obtain`,
        then checks that a mocked default (`custom_default_value`) is what the
        getter returns when nothing has been set.

        Raises:
            IncorrectFieldCount: if `unit` does not manage exactly one field
            ConventionViolation: on the first accessor misbehaving
        """
        self.output(f'Asserting "{fqn(unit)}"')

        names = self.accessor_names(unit)

        double = self.make_double(unit)

        # Ensures that no default value is available (opt-in, deprecated)
        if self.check_has_default:
            if callable(getattr(double, names.has_default, None)):
                self.assert_has_no_default_value(double, names.has_default)
            else:
                self.output(f" skipping {names.has_default}(), not implemented")

        # Ensures that the default value is None
        self.assert_default_value_is_none(double, names.get_default)

        # Ensures that no value is set
        self.assert_has_no_value(double, names.has)

        # Ensures that a value can be set and retrieved
        self.assert_can_specify_and_obtain_value(
            double, names.setter, names.getter, value_to_set_and_obtain
        )

        # Ensures that a custom default value is returned when nothing
        # else has been set prior to invoking the getter
        self.assert_returns_custom_default_value(
            unit, names.get_default, names.getter, custom_default_value
        )

    def assert_has_no_default_value(
        self,
        double: Any,
        has_default_method_name: str,
        fail_message: str = "Should not contain default value",
    ) -> None:
        """Assert that `has_default_method_name` returns False.

        Deprecated: design mixins without a "has-default" accessor.
        """
        warnings.warn(
            f"Checking `{has_default_method_name}` is deprecated. "
            "Please redesign the mixin without a has-default accessor",
            DeprecationWarning,
            stacklevel=2,
        )

        self.output(f" testing {has_default_method_name}()")

        actual = self._invoke(double, has_default_method_name)
        if actual is not False:
            self._fail(fail_message, has_default_method_name, False, actual)

    def assert_default_value_is_none(
        self,
        double: Any,
        get_default_method_name: str,
        fail_message: str = "Default value should be None",
    ) -> None:
        self.output(f" testing {get_default_method_name}()")

        actual = self._invoke(double, get_default_method_name)
        if actual is not None:
            self._fail(fail_message, get_default_method_name, None, actual)

    def assert_has_no_value(
        self,
        double: Any,
        has_method_name: str,
        fail_message: str = "Should not have a value set",
    ) -> None:
        self.output(f" testing {has_method_name}()")

        actual = self._invoke(double, has_method_name)
        if actual is not False:
            self._fail(fail_message, has_method_name, False, actual)

    def assert_can_specify_and_obtain_value(
        self,
        double: Any,
        set_method_name: str,
        get_method_name: str,
        value: Any,
        fail_message: str = "Incorrect value obtained",
    ) -> None:
        """Assert that `value` can be set and then retrieved again"""
        self.output(f" testing {set_method_name}({describe(value)})")

        self._invoke(double, set_method_name, value)

        self.output(f" testing {get_method_name}()")

        actual = self._invoke(double, get_method_name)
        if not is_same(value, actual):
            self._fail(fail_message, get_method_name, value, actual)

    def assert_returns_custom_default_value(
        self,
        unit: type,
        get_default_method_name: str,
        get_method_name: str,
        default_value: Any,
        fail_message: str = "Incorrect default value returned",
    ) -> None:
        """Assert that the getter falls back to a custom default value.

        A fresh double is built with `get_default_method_name` mocked to
        return `default_value`. Nothing is set on it before invoking the getter.
        """
        self.output(
            f" mocking {get_default_method_name}(), must return {describe(default_value)}"
        )

        double = self.make_double(unit, {get_default_method_name: default_value})

        self.output(f" testing {get_method_name}()")

        actual = self._invoke(double, get_method_name)
        if not is_same(default_value, actual):
            self._fail(fail_message, get_method_name, default_value, actual)

    def assert_compatible(self, unit: type, interface: type) -> None:
        """Assert that `unit` satisfies `interface`.

        A class combining both is synthesized and instantiated. Abstract
        methods of `interface` left unimplemented make this fail. For
        `typing.Protocol` interfaces, every protocol member must be present.

        Raises:
            IncompatibleUnitError: if `unit` does not satisfy `interface`
        """
        self.output(f'Asserting "{fqn(unit)}" is compatible with "{fqn(interface)}"')

        if is_protocol(interface):
            members = sorted(get_protocol_members(interface))
            missing = [member for member in members if not hasattr(unit, member)]
            if missing:
                raise IncompatibleUnitError(
                    f"{fqn(unit)} does not implement {fqn(interface)}: "
                    f"missing {', '.join(missing)}",
                    missing=missing,
                )
            return

        try:
            combined = type(f"{unit.__name__}Compatibility", (unit, interface), {})
        except TypeError as exc:
            raise IncompatibleUnitError(
                f"{fqn(unit)} cannot be combined with {fqn(interface)}: {exc}"
            ) from exc

        missing = sorted(getattr(combined, "__abstractmethods__", ()))
        if missing:
            raise IncompatibleUnitError(
                f"{fqn(unit)} does not implement {fqn(interface)}: "
                f"missing {', '.join(missing)}",
                missing=missing,
            )

        try:
            combined()
        except TypeError as exc:
            raise IncompatibleUnitError(
                f"{fqn(unit)} combined with {fqn(interface)} cannot be constructed: {exc}"
            ) from exc


def verify(
    unit: type, value_to_set_and_obtain: Any, custom_default_value: Any, **options: Any
) -> None:
    """Shortcut for `GetterSetterVerifier(**options).verify(...)`"""
    GetterSetterVerifier(**options).verify(
        unit, value_to_set_and_obtain, custom_default_value
    )


def assert_compatible(unit: type, interface: type, **options: Any) -> None:
    """Shortcut for `GetterSetterVerifier(**options).assert_compatible(...)`"""
    GetterSetterVerifier(**options).assert_compatible(unit, interface)
