"""Command-line interface for relgit."""
