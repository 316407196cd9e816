"""Command-line interface for Parallax."""
