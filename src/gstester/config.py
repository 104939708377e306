import logging
import os
import re

import tomllib

from gstester.exceptions import ConfigurationError
from gstester.naming import naming_style

logger = logging.getLogger(__name__)

CONFIG_FILES = [".gstester.toml", "gstester.toml", "pyproject.toml"]

_TRUTHY = {"true", "1", "yes", "on"}
_FALSY = {"false", "0", "no", "off", ""}


def _default_config():
    """Return the default verifier configuration.

    Returned fresh on every call so that tests manipulating config never
    touch the shared defaults.
    """
    return {
        "verbose": False,
        "naming": "snake",
        "check_has_default": False,
    }


class ConfigAttribute:
    """Makes an attribute forward to the config"""

    def __init__(self, name):
        self.__name__ = name

    def __get__(self, obj, type=None):
        if obj is None:
            return self
        return obj.config[self.__name__]

    def __set__(self, obj, value):
        obj.config[self.__name__] = value


class Config(dict):
    ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

    @classmethod
    def load_from_dict(cls, config: dict = None):
        """Load configuration from a dictionary."""
        config = cls._load_env_vars(dict(config or {}))
        return cls(**cls._normalize_config(config))

    @classmethod
    def load_from_path(cls, path: str):
        """Load configuration from the first config file found at or above `path`.

        `path` may be a file or a directory. The directory and up to 2 of its
        parents are searched. Defaults are used when no file is found.
        """

        def find_config_file(directory: str):
            for config_file in CONFIG_FILES:
                config_file_path = os.path.join(directory, config_file)
                if os.path.exists(config_file_path):
                    return config_file_path
            return None

        path = os.path.abspath(path)
        current_dir = path if os.path.isdir(path) else os.path.dirname(path)
        config_file_name = None

        for _ in range(3):  # Check the current directory and up to 2 parent directories
            config_file_name = find_config_file(current_dir)
            if config_file_name:
                break

            current_dir = os.path.dirname(current_dir)

        config = {}
        if config_file_name:
            logger.debug(f"Loading configuration from {config_file_name}")
            with open(config_file_name, "rb") as f:
                config = tomllib.load(f)

            # If pyproject.toml, extract configuration from the 'tool.gstester' section
            if config_file_name.endswith("pyproject.toml"):
                config = config.get("tool", {}).get("gstester", {})
        else:
            logger.debug(f"No configuration file found for {path}, using defaults")

        return cls.load_from_dict(config)

    @classmethod
    def _normalize_config(cls, config):
        """Normalize configuration values.

        Unknown keys are dropped, the section named by `GSTESTER_ENV` (if any)
        is merged over the base values, and values are coerced to their
        expected types.
        """
        environment = os.environ.get("GSTESTER_ENV") or None

        keys = _default_config().keys()
        finalized_config = _default_config()
        finalized_config.update(
            {key: value for key, value in config.items() if key in keys}
        )

        if environment and isinstance(config.get(environment), dict):
            finalized_config.update(
                {
                    key: value
                    for key, value in config[environment].items()
                    if key in keys
                }
            )

        for key in ("verbose", "check_has_default"):
            finalized_config[key] = cls._to_bool(key, finalized_config[key])

        finalized_config["naming"] = naming_style(finalized_config["naming"]).value

        return finalized_config

    @classmethod
    def _to_bool(cls, key, value):
        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUTHY:
                return True
            if lowered in _FALSY:
                return False

        if isinstance(value, int):
            return bool(value)

        raise ConfigurationError(f"Invalid boolean value for `{key}`: {value!r}")

    @classmethod
    def _load_env_vars(cls, config):
        if isinstance(config, dict):
            for key, value in config.items():
                if isinstance(value, str):
                    config[key] = cls._replace_env_var(value)
                elif isinstance(value, dict):
                    config[key] = cls._load_env_vars(dict(value))
        return config

    @classmethod
    def _replace_env_var(cls, value):
        """Replace environment variables in a string.

        Cases:
        1. No environment variable, e.g. "camel" - Use as is
        2. An environment variable, e.g. "${GST_VERBOSE}" - Replace with value
        3. An environment variable with a default value, e.g. "${GST_VERBOSE|false}"
            - Replace with value or default value
        """

        match = cls.ENV_VAR_PATTERN.search(value)
        while match:
            matched_string = match.group(1)

            if "|" in matched_string:
                env_var, default_value = matched_string.split("|", 1)
                env_value = os.getenv(env_var, default_value)
            else:
                env_value = os.getenv(matched_string)

            if env_value is None:
                raise ConfigurationError(
                    f"Environment variable {matched_string} is not set"
                )

            value = value.replace(f"${{{matched_string}}}", env_value)
            match = cls.ENV_VAR_PATTERN.search(value)

        return value
