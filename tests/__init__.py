"""ROA test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with a database (SQLite files and memory DBs).
- e2e/          : The `roa` command line driven through Click's CliRunner.
- fixtures/     : Shared fixtures and sample resource types (no tests here).

General guidance
- Keep unit fast and deterministic; prefer fakes and in-memory adapters at boundaries.
- Integration hits real dependencies with realistic setup/teardown.
"""
