"""Pytest integration for gstester.

The plugin is auto-registered through the ``pytest11`` entry point and
provides the ``gst_verifier`` fixture::

    def test_person_mixin(gst_verifier):
        gst_verifier.verify(PersonMixin, "Alice", "Bob")

Run with ``--gst-verbose`` to print the accessors being exercised.
"""

from .plugin import gst_verifier

__all__ = [
    "gst_verifier",
]
