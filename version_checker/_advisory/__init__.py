"""
Security advisory sources and matching for `version-checker`.
"""

from .interface import Advisory, AdvisoryDatabase, AdvisoryDatabaseError, AdvisoryVersions
from .match import count_applicable
from .rustsec import default_database_path, load_database

__all__ = [
    "Advisory",
    "AdvisoryDatabase",
    "AdvisoryDatabaseError",
    "AdvisoryVersions",
    "count_applicable",
    "default_database_path",
    "load_database",
]
