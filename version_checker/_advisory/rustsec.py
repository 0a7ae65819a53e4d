"""
Load advisories from a checkout of the RustSec advisory database:
https://github.com/rustsec/advisory-db
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

import toml

from version_checker._advisory.interface import (
    Advisory,
    AdvisoryDatabase,
    AdvisoryDatabaseError,
    AdvisoryVersions,
)

logger = logging.getLogger(__name__)

# Current advisories are Markdown files whose metadata lives in a fenced TOML block
# at the very top of the file.
_FRONT_MATTER_RE = re.compile(r"\A\s*```toml\s*\n(?P<toml>.*?)\n```", re.DOTALL)


def default_database_path() -> Path:
    """
    The location `cargo audit` clones the advisory database into.
    """
    cargo_home = os.getenv("CARGO_HOME")
    if cargo_home:
        return Path(cargo_home) / "advisory-db"
    return Path.home() / ".cargo" / "advisory-db"


def _advisory_metadata(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".md":
        match = _FRONT_MATTER_RE.match(text)
        if match is None:
            raise AdvisoryDatabaseError(f"advisory {path} has no TOML front matter")
        text = match.group("toml")
    return toml.loads(text)


def parse_advisory(path: Path) -> Advisory | None:
    """
    Parse a single advisory file, returning `None` for withdrawn advisories.

    Raises `AdvisoryDatabaseError` if the file is malformed.
    """
    try:
        metadata = _advisory_metadata(path)
    except (OSError, UnicodeDecodeError, toml.TomlDecodeError) as exc:
        raise AdvisoryDatabaseError(f"failed to read advisory {path}: {exc}") from exc

    advisory = metadata.get("advisory")
    if not isinstance(advisory, dict) or "id" not in advisory or "package" not in advisory:
        raise AdvisoryDatabaseError(f"advisory {path} is missing its [advisory] id or package")

    # If the advisory has been withdrawn, we skip it entirely.
    withdrawn_at = advisory.get("withdrawn")
    if withdrawn_at is not None:
        logger.debug(f"advisory {advisory['id']} marked as withdrawn at {withdrawn_at}")
        return None

    versions: AdvisoryVersions | None = None
    version_info = metadata.get("versions")
    if isinstance(version_info, dict):
        patched = version_info.get("patched")
        if patched is not None:
            patched = [str(p) for p in patched]
        versions = AdvisoryVersions(patched=patched)

    return Advisory(
        id=advisory["id"],
        package=advisory["package"],
        versions=versions,
    )


def load_database(path: Path) -> AdvisoryDatabase:
    """
    Load every crate advisory found under `path`.

    Raises `AdvisoryDatabaseError` if `path` isn't an advisory database checkout, or if
    any advisory in it is malformed.
    """
    crates_dir = path / "crates"
    if not crates_dir.is_dir():
        raise AdvisoryDatabaseError(f"no advisory database found at {path}")

    advisories: list[Advisory] = []
    for advisory_path in sorted(crates_dir.glob("*/*")):
        if advisory_path.suffix not in {".md", ".toml"}:
            continue
        advisory = parse_advisory(advisory_path)
        if advisory is not None:
            advisories.append(advisory)

    logger.debug(f"loaded {len(advisories)} advisories from {path}")
    return AdvisoryDatabase(advisories)
