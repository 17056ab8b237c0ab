"""
Script: release_tagger package
What: Holds the Python workflow helpers that tag a built package release.
Doing: Groups the CLI entrypoint, config loading, version reading, and git/build steps in one importable package.
Why: Keeps release-tagging logic readable and testable instead of spreading it across workflow shell steps.
Goal: Provide a clear, maintainable home for the build-and-tag release flow.
"""
