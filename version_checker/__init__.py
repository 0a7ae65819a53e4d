"""
The `version_checker` APIs.
"""

from version_checker._version import __version__

__all__ = ["__version__"]
