"""Minimal version helper for the spin_wheel application."""

from importlib import metadata

PACKAGE_NAME = "spin_wheel"
DISTRIBUTION_NAME = "spin-wheel"


def get_version() -> str:
    """
    Get version for application.

    :return: Version number.
    """
    try:  # installed, including editable installs
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:  # plain source checkout
        import setuptools_scm  # type: ignore[import-untyped]

        return str(setuptools_scm.get_version(fallback_version="0.0.0"))


__all__ = ["get_version"]
