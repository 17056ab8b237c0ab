from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Mapping

from release_tagger.common import ReleaseToolError


DEFAULT_COMMAND = "tag-release"


def command_map() -> dict[str, Callable[[], None]]:
    """
    Map CLI command names to Python entry functions.

    Each value is a `main()` function from one workflow helper module.
    """
    from release_tagger.read_version import main as read_version
    from release_tagger.tag_release import main as tag_release

    return {
        "tag-release": tag_release,
        "read-version": read_version,
    }


def build_parser(commands: Mapping[str, Callable[[], None]]) -> argparse.ArgumentParser:
    """Build argument parser with one positional command choice."""
    parser = argparse.ArgumentParser(
        prog="python3 -m release_tagger.cli",
        description="Run one release workflow command.",
    )
    # With no command, run the release itself, matching the bare action invocation.
    parser.add_argument(
        "command",
        nargs="?",
        default=DEFAULT_COMMAND,
        choices=sorted(commands.keys()),
    )
    return parser


def run_command(command: str, commands: Mapping[str, Callable[[], None]]) -> None:
    """
    Run one registered command.

    `commands` is passed in to keep this function easy to test.
    """
    commands[command]()


def main(argv: list[str] | None = None) -> None:
    # Build command registry once so parser and dispatcher use the same keys.
    commands = command_map()
    parser = build_parser(commands)
    args = parser.parse_args(argv)

    try:
        run_command(args.command, commands)
    except ReleaseToolError as exc:
        # Keep failures short and readable in workflow logs.
        print(str(exc), file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
