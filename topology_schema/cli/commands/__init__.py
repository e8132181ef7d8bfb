"""CLI command modules."""

from . import exchange_cmd

__all__ = ["exchange_cmd"]
