""" Module defines utilities for importing modules and classes """

from importlib import import_module


def import_from_string(val, package=None):
    """
    Attempt to import a class from a string representation.

    Both `package.module.ClassName` and `package.module:ClassName` are accepted.
    """
    try:
        if ":" in val:
            module_path, class_name = val.split(":", 1)
        else:
            module_path, class_name = val.rsplit(".", 1)
        module = import_module(module_path, package=package)
        return getattr(module, class_name)
    except (ImportError, AttributeError, ValueError) as e:
        msg = f"Could not import {val}. {e.__class__.__name__}: {e}"
        raise ImportError(msg)
