"""CLI command group for compound names.

This module exposes the root Click command group `compound_names` which
aggregates subcommands implemented in sibling modules.

Example usage:

        compound-names parse 'a\\.b.c'
        compound-names format a.b c
        compound-names hash oss.cs.fau.de
"""

from __future__ import annotations

import click

from ..log import configure_logging, logger
from .format import format_cmd
from .parse import hash_cmd, parse_cmd


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default=None,
    help="Set the logging level (default: $COMPOUND_NAMES_LOG_LEVEL or WARNING)",
)
def compound_names(log_level: str | None):
    """Compound name parsing and formatting commands."""
    configure_logging(log_level)
    logger.debug("Logging configured")


# Register subcommands
compound_names.add_command(parse_cmd)
compound_names.add_command(format_cmd)
compound_names.add_command(hash_cmd)

__all__ = ["compound_names"]
