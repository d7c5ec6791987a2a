"""ROA command-line interface."""
