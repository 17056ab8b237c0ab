"""
Script: release_tagger/tag_release.py
What: Builds the package, commits the build output, and pushes an annotated release tag.
Doing: Sets the git identity, runs `<pm>` and `<pm> build`, runs `git add -f dist`, then `git tag -a` and `git push origin refs/tags/v<version>`.
Why: Keeps the release sequence in one place instead of duplicating shell commands in workflows.
Goal: Publish a `v<version>` tag that points at a commit containing the built package.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping

from release_tagger.common import run_cmd
from release_tagger.config import ReleaseConfig, load_config
from release_tagger.package_version import (
    SkipRelease,
    read_package_version,
    tag_message,
    tag_name,
)


Runner = Callable[..., None]

BUILD_OUTPUT_DIR = "dist"
REMOTE = "origin"


@dataclass(frozen=True)
class ReleaseOutcome:
    """Result of one run: the pushed tag, or the reason nothing happened."""

    version: str = ""
    tag: str = ""
    ref: str = ""
    skipped: SkipRelease | None = None


def git_setup(directory: Path, config: ReleaseConfig, runner: Runner = run_cmd) -> None:
    # The annotated tag records this identity as its tagger.
    author = config.tag_author
    runner(directory, "git", "config", "user.name", author.name)
    runner(directory, "git", "config", "user.email", author.email)


def add_built_package(directory: Path, config: ReleaseConfig, runner: Runner = run_cmd) -> None:
    package_manager = config.package_manager
    runner(directory, package_manager)
    runner(directory, package_manager, "build")
    # Build output is usually gitignored, so force-add it.
    runner(directory, "git", "add", "-f", BUILD_OUTPUT_DIR)


def create_tag(directory: Path, version: str, runner: Runner = run_cmd) -> str:
    tag = tag_name(version)
    runner(directory, "git", "tag", "-a", "-m", tag_message(version), tag)
    return tag


def push_tag(directory: Path, tag: str, runner: Runner = run_cmd) -> str:
    ref = f"refs/tags/{tag}"
    runner(directory, "git", "push", REMOTE, ref)
    return ref


def process_directory(
    directory: Path,
    config: ReleaseConfig,
    runner: Runner = run_cmd,
) -> ReleaseOutcome:
    """
    Run the release sequence for one checkout.

    Each step raises on failure, so later steps never run after an error.
    A tag created locally before a failed push is left in place.
    """
    version = read_package_version(directory)
    if isinstance(version, SkipRelease):
        return ReleaseOutcome(skipped=version)

    git_setup(directory, config, runner)
    add_built_package(directory, config, runner)
    tag = create_tag(directory, version, runner)
    ref = push_tag(directory, tag, runner)
    print("Done.")
    return ReleaseOutcome(version=version, tag=tag, ref=ref)


def run_release(
    environ: Mapping[str, str] | None = None,
    runner: Runner = run_cmd,
) -> ReleaseOutcome:
    # The event payload is read before the manifest, so a broken event file
    # fails the run even when there is nothing to release.
    config = load_config(environ)
    return process_directory(config.workspace, config, runner)


def main() -> None:
    # A skipped run returns normally so the workflow step exits 0.
    run_release(runner=run_cmd)


if __name__ == "__main__":
    main()
