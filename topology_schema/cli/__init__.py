"""Command line interface for topology-schema."""

from topology_schema.cli.main import app, main

__all__ = ["app", "main"]
