"""Entry points into ROA (currently the command-line interface)."""
