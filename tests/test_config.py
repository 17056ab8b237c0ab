"""
Script: tests/test_config.py
What: Tests config resolution in `release_tagger/config.py`.
Doing: Checks env defaults, INPUT_ aliases, and owner identity extraction from the event payload.
Why: A wrong default silently changes which directory or identity a release uses.
Goal: Keep the release inputs predictable.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from release_tagger.common import ReleaseToolError
from release_tagger.config import (
    DEFAULT_COMMIT_PATTERN,
    TagAuthor,
    load_config,
    resolve_workspace,
    tag_author_from_event,
)


def write_event(directory: Path, payload: object) -> Path:
    event_path = directory / "event.json"
    event_path.write_text(json.dumps(payload), encoding="utf-8")
    return event_path


OWNER_EVENT = {"repository": {"owner": {"name": "octocat", "email": "octocat@example.com"}}}


class LoadConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(temp_dir.cleanup)
        self.tmp = Path(temp_dir.name)
        self.event_path = write_event(self.tmp, OWNER_EVENT)

    def test_defaults(self) -> None:
        config = load_config({"GITHUB_EVENT_PATH": str(self.event_path)})

        self.assertEqual(config.workspace, Path("/github/workspace"))
        self.assertEqual(config.commit_pattern, r"^(?:Release|Version) (\S+)")
        self.assertEqual(config.commit_pattern, DEFAULT_COMMIT_PATTERN)
        self.assertEqual(config.package_manager, "yarn")
        self.assertEqual(config.tag_author, TagAuthor("octocat", "octocat@example.com"))

    def test_input_aliases_are_used_when_bare_names_are_unset(self) -> None:
        config = load_config(
            {
                "GITHUB_EVENT_PATH": str(self.event_path),
                "INPUT_COMMIT_PATTERN": "^v(.+)",
                "INPUT_PACKAGE_MANAGER": "npm",
            }
        )
        self.assertEqual(config.commit_pattern, "^v(.+)")
        self.assertEqual(config.package_manager, "npm")

    def test_bare_commit_pattern_wins_over_input_alias(self) -> None:
        config = load_config(
            {
                "GITHUB_EVENT_PATH": str(self.event_path),
                "COMMIT_PATTERN": "^bare",
                "INPUT_COMMIT_PATTERN": "^input",
            }
        )
        self.assertEqual(config.commit_pattern, "^bare")

    def test_missing_event_file_is_fatal(self) -> None:
        with self.assertRaises(ReleaseToolError):
            load_config({"GITHUB_EVENT_PATH": str(self.tmp / "missing.json")})

    def test_event_file_with_invalid_utf8_is_fatal(self) -> None:
        self.event_path.write_bytes(b"\xff\xfe{}")
        with self.assertRaises(ReleaseToolError) as ctx:
            load_config({"GITHUB_EVENT_PATH": str(self.event_path)})
        self.assertIn("Failed to read event payload", str(ctx.exception))

    def test_config_is_immutable(self) -> None:
        config = load_config({"GITHUB_EVENT_PATH": str(self.event_path)})
        with self.assertRaises(AttributeError):
            config.commit_pattern = "changed"  # type: ignore[misc]


class ResolveWorkspaceTests(unittest.TestCase):
    def test_workspace_wins_over_github_workspace(self) -> None:
        environ = {"WORKSPACE": "/work", "GITHUB_WORKSPACE": "/gh"}
        self.assertEqual(resolve_workspace(environ), Path("/work"))

    def test_github_workspace_used_when_workspace_empty(self) -> None:
        environ = {"WORKSPACE": "", "GITHUB_WORKSPACE": "/gh"}
        self.assertEqual(resolve_workspace(environ), Path("/gh"))


class TagAuthorTests(unittest.TestCase):
    def test_reads_owner_identity(self) -> None:
        self.assertEqual(tag_author_from_event(OWNER_EVENT), TagAuthor("octocat", "octocat@example.com"))

    def test_missing_owner_email_is_fatal(self) -> None:
        with self.assertRaises(ReleaseToolError):
            tag_author_from_event({"repository": {"owner": {"name": "octocat"}}})

    def test_null_owner_name_is_fatal(self) -> None:
        event = {"repository": {"owner": {"name": None, "email": "octocat@example.com"}}}
        with self.assertRaises(ReleaseToolError):
            tag_author_from_event(event)

    def test_non_object_payload_is_fatal(self) -> None:
        with self.assertRaises(ReleaseToolError):
            tag_author_from_event(None)


if __name__ == "__main__":
    unittest.main()
