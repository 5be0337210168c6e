"""Simplex CLI entry point."""

import logging

import click

from simplex.config import SimplexConfig


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (default: SIMPLEX_LOG_LEVEL or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Simplex — extract named fields from text with simple expressions."""
    config = SimplexConfig.from_env()
    if log_level:
        config.log_level = log_level.upper()
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Register subcommands
from simplex.cli.match_cmd import compile_cmd, match_cmd  # noqa: E402
from simplex.cli.library_cmd import library  # noqa: E402

cli.add_command(compile_cmd)
cli.add_command(match_cmd)
cli.add_command(library)
