import pytest

from gstester.exceptions import ConfigurationError
from gstester.naming import (
    AccessorNames,
    NamingStyle,
    derive_accessor_names,
    naming_style,
)


class TestSnakeCase:
    def test_simple_field(self):
        assert derive_accessor_names("name") == AccessorNames(
            field="name",
            setter="set_name",
            getter="get_name",
            has="has_name",
            get_default="get_default_name",
            has_default="has_default_name",
        )

    def test_compound_field(self):
        names = derive_accessor_names("first_name")

        assert names.setter == "set_first_name"
        assert names.get_default == "get_default_first_name"

    def test_camel_cased_field_is_underscored(self):
        assert derive_accessor_names("firstName").getter == "get_first_name"


class TestCamelCase:
    def test_simple_field(self):
        assert derive_accessor_names("name", NamingStyle.CAMEL) == AccessorNames(
            field="name",
            setter="setName",
            getter="getName",
            has="hasName",
            get_default="getDefaultName",
            has_default="hasDefaultName",
        )

    def test_compound_field(self):
        names = derive_accessor_names("first_name", "camel")

        assert names.setter == "setFirstName"
        assert names.has_default == "hasDefaultFirstName"

    def test_camel_cased_field(self):
        assert derive_accessor_names("firstName", "camel").getter == "getFirstName"


class TestNamingStyle:
    def test_accepts_enum_and_strings(self):
        assert naming_style(NamingStyle.CAMEL) is NamingStyle.CAMEL
        assert naming_style("SNAKE") is NamingStyle.SNAKE

    def test_unknown_style(self):
        with pytest.raises(ConfigurationError) as exc:
            naming_style("kebab")

        assert "snake, camel" in exc.value.args[0]


def test_accessor_names_are_immutable():
    names = derive_accessor_names("name")

    with pytest.raises(AttributeError):
        names.getter = "fetch_name"
