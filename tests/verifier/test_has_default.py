"""The deprecated has-default check only runs when asked for"""

import warnings

import pytest

from gstester import ConventionViolation, GetterSetterVerifier, make_double
from tests.support.mixins import HasDefaultTrueMixin, LegacyPersonMixin, PersonMixin


@pytest.fixture
def strict_verifier():
    return GetterSetterVerifier(check_has_default=True)


def test_check_is_off_by_default(verifier):
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        verifier.verify(HasDefaultTrueMixin, "Alice", "Bob")


def test_check_warns_when_enabled(strict_verifier):
    with pytest.deprecated_call():
        strict_verifier.verify(LegacyPersonMixin, "Alice", "Bob")


def test_check_fails_when_default_is_claimed(strict_verifier):
    with pytest.deprecated_call():
        with pytest.raises(ConventionViolation) as exc:
            strict_verifier.verify(HasDefaultTrueMixin, "Alice", "Bob")

    assert exc.value.operation == "has_default_person"
    assert exc.value.args[0].startswith("Should not contain default value")


def test_check_is_skipped_when_accessor_is_absent(caplog, restore_logger):
    caplog.set_level("INFO", logger="gstester")
    verifier = GetterSetterVerifier(check_has_default=True, verbose=True)

    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        verifier.verify(PersonMixin, "Alice", "Bob")

    assert " skipping has_default_name(), not implemented" in caplog.messages


def test_standalone_assertion_always_warns(verifier):
    with pytest.deprecated_call():
        verifier.assert_has_no_default_value(
            make_double(LegacyPersonMixin), "has_default_person"
        )
