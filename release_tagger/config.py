"""
Script: release_tagger/config.py
What: Resolves the release configuration from environment variables and the event payload.
Doing: Reads workspace/event/input env values once and pulls the repository owner identity from the event JSON.
Why: Later steps get one immutable record instead of reading the environment themselves.
Goal: Make every input of a release run visible in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from release_tagger.common import ReleaseToolError, input_env, optional_env, read_json_file


DEFAULT_WORKSPACE = "/github/workspace"
DEFAULT_EVENT_PATH = "/github/workflow/event.json"
DEFAULT_COMMIT_PATTERN = r"^(?:Release|Version) (\S+)"
DEFAULT_PACKAGE_MANAGER = "yarn"
MISSING_OWNER_MESSAGE = "Event payload missing repository.owner.name or repository.owner.email"


@dataclass(frozen=True)
class TagAuthor:
    name: str
    email: str


@dataclass(frozen=True)
class ReleaseConfig:
    """
    Inputs for one release run.

    `commit_pattern` is carried for parity with the action inputs; no release
    step matches commit messages against it.
    """

    workspace: Path
    event_path: Path
    commit_pattern: str
    tag_author: TagAuthor
    package_manager: str = DEFAULT_PACKAGE_MANAGER


def tag_author_from_event(event: object) -> TagAuthor:
    """Return the repository owner identity from a GitHub event payload."""
    try:
        owner = event["repository"]["owner"]  # type: ignore[index]
        name = owner["name"]
        email = owner["email"]
    except (KeyError, TypeError) as exc:
        raise ReleaseToolError(MISSING_OWNER_MESSAGE) from exc
    if name is None or email is None:
        raise ReleaseToolError(MISSING_OWNER_MESSAGE)
    return TagAuthor(name=str(name), email=str(email))


def load_event(event_path: Path) -> object:
    try:
        return read_json_file(event_path)
    except (OSError, ValueError) as exc:
        raise ReleaseToolError(f"Failed to read event payload: {event_path}") from exc


def resolve_workspace(environ: Mapping[str, str] | None = None) -> Path:
    # Set by the runner, so there is no INPUT_ alias.
    workspace = optional_env("WORKSPACE", environ=environ) or optional_env(
        "GITHUB_WORKSPACE", DEFAULT_WORKSPACE, environ=environ
    )
    return Path(workspace)


def load_config(environ: Mapping[str, str] | None = None) -> ReleaseConfig:
    workspace = resolve_workspace(environ)
    event_path = Path(optional_env("GITHUB_EVENT_PATH", DEFAULT_EVENT_PATH, environ=environ))
    commit_pattern = input_env("COMMIT_PATTERN", DEFAULT_COMMIT_PATTERN, environ=environ)
    package_manager = input_env("PACKAGE_MANAGER", DEFAULT_PACKAGE_MANAGER, environ=environ)

    tag_author = tag_author_from_event(load_event(event_path))

    return ReleaseConfig(
        workspace=workspace,
        event_path=event_path,
        commit_pattern=commit_pattern,
        tag_author=tag_author,
        package_manager=package_manager,
    )
