"""Pattern library CLI commands — list and run."""

from pathlib import Path

import click

from simplex.cli.match_cmd import echo_matches, read_text
from simplex.config import SimplexConfig
from simplex.errors import SimplexError
from simplex.library import PatternLibrary


def _load_library(ctx: click.Context, path: Path | None) -> PatternLibrary:
    config: SimplexConfig = ctx.obj or SimplexConfig.from_env()
    library_path = path or config.library_path
    if not library_path.exists():
        click.echo(f"Error: Pattern library not found at {library_path}", err=True)
        raise SystemExit(2)

    library = PatternLibrary(library_path)
    try:
        library.load_all()
    except SimplexError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(2)
    return library


_path_option = click.option(
    "--path",
    "library_path",
    default=None,
    type=click.Path(path_type=Path),
    help="Pattern library file (default: SIMPLEX_LIBRARY_PATH or ./patterns.yaml).",
)


@click.group()
def library():
    """Pattern library commands."""
    pass


@library.command("list")
@_path_option
@click.pass_context
def list_cmd(ctx: click.Context, library_path: Path | None):
    """List the patterns in the library."""
    patterns = _load_library(ctx, library_path).list_patterns()
    if not patterns:
        click.echo("No patterns defined.")
        return

    click.echo(f"{len(patterns)} pattern(s):")
    for definition in sorted(patterns, key=lambda d: d.name):
        line = f"  {definition.name}: {definition.expression}"
        if definition.description:
            line += f"  ({definition.description})"
        click.echo(line)


@library.command("run")
@click.argument("name")
@click.argument("text", required=False)
@_path_option
@click.pass_context
def run_cmd(ctx: click.Context, name: str, text: str | None, library_path: Path | None):
    """Match the library pattern NAME against TEXT (or stdin)."""
    patterns = _load_library(ctx, library_path)
    try:
        matcher = patterns.build(name)
    except SimplexError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(2)

    echo_matches(matcher, read_text(text))
