"""
READMIN CLI
"""

from readmin.cli.main import cli

__all__ = ["cli"]
