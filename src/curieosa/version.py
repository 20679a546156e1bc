"""Version information for :mod:`curieosa`."""

__all__ = [
    "VERSION",
    "get_version",
]

VERSION = "0.1.0-dev"


def get_version() -> str:
    """Get the :mod:`curieosa` version string."""
    return VERSION
