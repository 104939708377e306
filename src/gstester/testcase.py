"""unittest integration.

Mix `GetterSetterTestMixin` into a `unittest.TestCase`::

    class PersonMixinTest(GetterSetterTestMixin, unittest.TestCase):
        gst_config = {"naming": "camel"}

        def test_accessors(self):
            self.assertGetterSetterMethods(PersonMixin, "Alice", "Bob")

Violations subclass `AssertionError`, so unittest reports them as failures.
"""

from gstester.verifier import GetterSetterVerifier


class GetterSetterTestMixin:
    gst_config: dict = {}

    @property
    def gst_verifier(self) -> GetterSetterVerifier:
        verifier = getattr(self, "_gst_verifier", None)
        if verifier is None:
            verifier = GetterSetterVerifier(**self.gst_config)
            self._gst_verifier = verifier
        return verifier

    def assertGetterSetterMethods(self, unit, value_to_set_and_obtain, custom_default_value):
        self.gst_verifier.verify(unit, value_to_set_and_obtain, custom_default_value)

    def assertMixinCompatibility(self, unit, interface):
        self.gst_verifier.assert_compatible(unit, interface)
