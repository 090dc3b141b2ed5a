"""tests/unit/test_version.py"""

from importlib.metadata import version

import urlkit
from urlkit.version import __version__


def test_version_matches_distribution():
    """Verify that the package version is the installed distribution version."""
    assert urlkit.__version__ == __version__
    assert version("urlkit") == __version__


def test_version_is_numeric_release():
    """Verify that every version segment is a number."""
    assert all(part.isdigit() for part in __version__.split("."))
