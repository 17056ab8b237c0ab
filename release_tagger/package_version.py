"""
Script: release_tagger/package_version.py
What: Reads the project version from `package.json`.
Doing: Returns the version string, a skip result when no manifest exists, or fails on a manifest without a version.
Why: A repository without a manifest is "nothing to release", which is different from a broken manifest.
Goal: Give the release flow one version value, or an explicit reason to stop cleanly.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from release_tagger.common import ReleaseToolError, read_json_file


MANIFEST_NAME = "package.json"


@dataclass(frozen=True)
class SkipRelease:
    """Neutral outcome: this checkout has nothing to release."""

    message: str


def tag_name(version: str) -> str:
    return f"v{version}"


def tag_message(version: str) -> str:
    return f"Release {version}"


def read_package_version(directory: str | Path) -> str | SkipRelease:
    """
    Return the `version` field of `<directory>/package.json`.

    Rules:
    - Unreadable or unparsable manifest: return `SkipRelease`.
    - Manifest without a `version` (or not an object at all): raise.
    - Otherwise return the version as written, without semver checks.
    """
    package_file = Path(directory) / MANIFEST_NAME
    try:
        package_obj = read_json_file(package_file)
    except (OSError, ValueError):
        # ValueError covers both bad JSON and bytes that are not UTF-8.
        return SkipRelease(f"package file not found: {package_file}")

    version = package_obj.get("version") if isinstance(package_obj, dict) else None
    if version is None:
        raise ReleaseToolError("missing version field!")
    if isinstance(version, str):
        return version
    # Numbers and booleans keep their JSON spelling (`true`, not `True`).
    return json.dumps(version)
