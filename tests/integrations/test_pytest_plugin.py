import pytest

PERSON_MIXIN = """
from typing import Optional


class PersonMixin:
    name: Optional[str] = None

    def set_name(self, name):
        self.name = name

    def get_name(self):
        if not self.has_name():
            self.set_name(self.get_default_name())
        return self.name

    def has_name(self):
        return self.name is not None

    def get_default_name(self):
        return None


class CamelPersonMixin:
    __managed_fields__ = "name"

    def __init__(self):
        self._name = None

    def setName(self, name):
        self._name = name

    def getName(self):
        if not self.hasName():
            self.setName(self.getDefaultName())
        return self._name

    def hasName(self):
        return self._name is not None

    def getDefaultName(self):
        return None
"""


@pytest.fixture
def project(pytester):
    pytester.makepyfile(mixins=PERSON_MIXIN)
    pytester.syspathinsert()
    return pytester


def test_fixture_verifies_mixins(project):
    project.makepyfile(
        """
        from mixins import PersonMixin

        def test_person(gst_verifier):
            gst_verifier.verify(PersonMixin, "Alice", "Bob")
        """
    )

    result = project.runpytest()

    result.assert_outcomes(passed=1)


def test_violations_are_reported_as_failures(project):
    project.makepyfile(
        """
        from typing import Optional

        from mixins import PersonMixin

        class AlwaysDefaulted(PersonMixin):
            name: Optional[str] = None

            def get_default_name(self):
                return "John Doe"

        def test_person(gst_verifier):
            gst_verifier.verify(AlwaysDefaulted, "Alice", "Bob")
        """
    )

    result = project.runpytest()

    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(["*Default value should be None*"])


def test_naming_from_pyproject(project):
    project.makepyprojecttoml('[tool.gstester]\nnaming = "camel"\n')
    project.makepyfile(
        """
        from mixins import CamelPersonMixin

        def test_person(gst_verifier):
            assert gst_verifier.naming == "camel"
            gst_verifier.verify(CamelPersonMixin, "Alice", "Bob")
        """
    )

    result = project.runpytest()

    result.assert_outcomes(passed=1)


def test_naming_option_overrides_pyproject(project):
    project.makepyprojecttoml('[tool.gstester]\nnaming = "camel"\n')
    project.makepyfile(
        """
        from mixins import PersonMixin

        def test_person(gst_verifier):
            assert gst_verifier.naming == "snake"
            gst_verifier.verify(PersonMixin, "Alice", "Bob")
        """
    )

    result = project.runpytest("--gst-naming", "snake")

    result.assert_outcomes(passed=1)


def test_quiet_by_default(project):
    project.makepyfile(
        """
        from mixins import PersonMixin

        def test_person(gst_verifier):
            assert gst_verifier.verbose is False
        """
    )

    result = project.runpytest()

    result.assert_outcomes(passed=1)


def test_verbose_flag_traces_accessors(project):
    project.makepyfile(
        """
        from mixins import PersonMixin

        def test_person(gst_verifier):
            assert gst_verifier.verbose is True
            gst_verifier.verify(PersonMixin, "Alice", "Bob")
        """
    )

    result = project.runpytest_subprocess("--gst-verbose", "-s")

    result.assert_outcomes(passed=1)
    result.stderr.fnmatch_lines(
        [
            "Asserting ?mixins.PersonMixin?",
            " testing set_name('Alice')",
        ]
    )


def test_marker_is_registered(project):
    project.makepyfile(
        """
        import pytest

        @pytest.mark.gst
        def test_marked():
            pass
        """
    )

    result = project.runpytest("--strict-markers")

    result.assert_outcomes(passed=1)


def test_verbose_from_pyproject_traces_accessors(project):
    project.makepyprojecttoml("[tool.gstester]\nverbose = true\n")
    project.makepyfile(
        """
        from mixins import PersonMixin

        def test_person(gst_verifier):
            assert gst_verifier.verbose is True
            gst_verifier.verify(PersonMixin, "Alice", "Bob")
        """
    )

    result = project.runpytest_subprocess("-s")

    result.assert_outcomes(passed=1)
    result.stderr.fnmatch_lines([" testing set_name('Alice')"])
