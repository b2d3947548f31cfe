"""Logging setup shared by the CLI."""
