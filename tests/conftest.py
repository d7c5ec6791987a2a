"""Global pytest fixtures for ROA."""

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.resources",
]
