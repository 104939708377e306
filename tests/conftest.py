"""Module to setup shared artifacts for tests"""

import logging

import pytest

pytest_plugins = ["pytester"]


@pytest.fixture
def restore_logger():
    """Undo handlers and level set on the `gstester` logger during a test"""
    logger = logging.getLogger("gstester")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def verifier():
    from gstester import GetterSetterVerifier

    return GetterSetterVerifier()


@pytest.fixture
def verbose_verifier(caplog, restore_logger):
    from gstester import GetterSetterVerifier

    caplog.set_level(logging.INFO, logger="gstester")
    return GetterSetterVerifier(verbose=True)
