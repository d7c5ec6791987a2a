"""End-to-end tests of the `roa` command line."""
