"""pubterm command-line interface."""
