"""Core algebra for pubterm."""
