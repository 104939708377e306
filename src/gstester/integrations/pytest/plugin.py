"""gstester pytest plugin, auto-registered via the ``pytest11`` entry point.

Verbosity comes from the ``--gst-verbose`` flag, never from inspecting
``sys.argv``. Other settings are read from the rootdir's configuration
(``[tool.gstester]`` in ``pyproject.toml``) and can be overridden on the
command line.
"""

import pytest

from gstester.config import Config
from gstester.naming import NamingStyle
from gstester.verifier import GetterSetterVerifier


def pytest_addoption(parser):
    """Add ``--gst-verbose`` and ``--gst-naming`` CLI options."""
    group = parser.getgroup("gstester", "getter-setter convention verifier")
    group.addoption(
        "--gst-verbose",
        action="store_true",
        default=False,
        help="Trace the accessors exercised by the getter-setter verifier",
    )
    group.addoption(
        "--gst-naming",
        action="store",
        default=None,
        choices=[style.value for style in NamingStyle],
        help="Accessor naming style (overrides [tool.gstester] naming)",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "gst: getter-setter convention verification tests"
    )


@pytest.fixture
def gst_verifier(request):
    """A `GetterSetterVerifier` configured for the current test run."""
    config = Config.load_from_path(str(request.config.rootpath))

    overrides = {}
    if request.config.getoption("--gst-verbose", default=False):
        overrides["verbose"] = True

    naming = request.config.getoption("--gst-naming", default=None)
    if naming:
        overrides["naming"] = naming

    return GetterSetterVerifier(config, **overrides)
