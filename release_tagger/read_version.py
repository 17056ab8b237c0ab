"""
Script: release_tagger/read_version.py
What: Exposes the package version and release tag name as step outputs.
Doing: Reads `package.json` from the workspace and writes `version`, `tag`, and `skipped` to `GITHUB_OUTPUT`.
Why: Later workflow steps (release notes, uploads) need the same tag name the release step pushes.
Goal: Derive the tag name in one place for the whole workflow.
"""

from __future__ import annotations

from typing import Mapping

from release_tagger.common import write_github_outputs
from release_tagger.config import resolve_workspace
from release_tagger.package_version import SkipRelease, read_package_version, tag_name


def build_version_outputs(version: str | SkipRelease) -> dict[str, str]:
    if isinstance(version, SkipRelease):
        return {"version": "", "tag": "", "skipped": "true"}
    return {"version": version, "tag": tag_name(version), "skipped": "false"}


def main(environ: Mapping[str, str] | None = None) -> None:
    # Only the workspace is needed here; the event payload is not read.
    version = read_package_version(resolve_workspace(environ))
    outputs = build_version_outputs(version)
    write_github_outputs(outputs, environ=environ)

    if isinstance(version, SkipRelease):
        print(version.message)
    else:
        print(f"Package version: {version}")
        print(f"Release tag: {outputs['tag']}")


if __name__ == "__main__":
    main()
