"""
Command-line interface.
"""

from matchbet.cli.commands import cli

__all__ = ["cli"]
