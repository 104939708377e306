from gstester import GetterSetterVerifier
from gstester.config import Config, ConfigAttribute


def test_attributes_forward_to_config():
    verifier = GetterSetterVerifier(naming="camel")

    assert verifier.naming == "camel"
    assert verifier.verbose is False


def test_setting_an_attribute_updates_config():
    verifier = GetterSetterVerifier()
    verifier.verbose = True

    assert verifier.config["verbose"] is True


def test_keywords_override_config_object():
    config = Config.load_from_dict({"naming": "camel", "verbose": True})

    verifier = GetterSetterVerifier(config, verbose=False)

    assert verifier.naming == "camel"
    assert verifier.verbose is False


def test_attribute_on_class_returns_descriptor():
    assert isinstance(GetterSetterVerifier.naming, ConfigAttribute)
