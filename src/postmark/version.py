"""Version lookup for the library and the CLI ``--version`` flag."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version


DISTRIBUTION = "postmark"
UNKNOWN_VERSION = "0+unknown"


def get_version() -> str:
    """Return the version of the installed ``postmark`` distribution.

    Running from a source checkout that was never installed yields
    ``UNKNOWN_VERSION``.
    """
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return UNKNOWN_VERSION


__all__ = ["DISTRIBUTION", "UNKNOWN_VERSION", "get_version"]
