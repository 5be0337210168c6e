"""Compile and match CLI commands."""

import json

import click

from simplex.errors import CompileError
from simplex.matcher import Simplex


def read_text(text: str | None) -> str:
    """Use the TEXT argument, or read stdin when it was omitted."""
    if text is not None:
        return text
    return click.get_text_stream("stdin").read()


def echo_matches(matcher: Simplex, source: str) -> None:
    """Print one JSON object per match; exit 1 when there are none."""
    if matcher.options.global_:
        results = matcher.match_all(source)
    else:
        result = matcher.match(source)
        results = [result] if result is not None else []

    if not results:
        click.echo(click.style("No match.", fg="yellow"), err=True)
        raise SystemExit(1)
    for result in results:
        click.echo(json.dumps(result))


def build_matcher(expression: str, options: dict) -> Simplex:
    try:
        return Simplex(expression, options)
    except CompileError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(2)


@click.command("compile")
@click.argument("expression")
@click.option("--markers", default=None, help="Field markers, e.g. '<>' or '{{}}'.")
@click.option(
    "--strict-whitespace",
    is_flag=True,
    default=False,
    help="Match whitespace in the expression exactly.",
)
def compile_cmd(expression: str, markers: str | None, strict_whitespace: bool):
    """Show the regular expression and fields EXPRESSION compiles to."""
    matcher = build_matcher(
        expression,
        {"fieldMarkers": markers, "strictWhitespace": strict_whitespace},
    )
    click.echo(f"pattern: {matcher.pattern}")
    click.echo(f"fields:  {', '.join(matcher.fields) or '(none)'}")


@click.command("match")
@click.argument("expression")
@click.argument("text", required=False)
@click.option("--markers", default=None, help="Field markers, e.g. '<>' or '{{}}'.")
@click.option(
    "--global", "-g", "global_",
    is_flag=True,
    default=False,
    help="Print every occurrence instead of the first.",
)
@click.option(
    "--strict-whitespace",
    is_flag=True,
    default=False,
    help="Match whitespace in the expression exactly.",
)
@click.option(
    "--weak-parse",
    is_flag=True,
    default=False,
    help="Convert numeric and true/false values.",
)
def match_cmd(
    expression: str,
    text: str | None,
    markers: str | None,
    global_: bool,
    strict_whitespace: bool,
    weak_parse: bool,
):
    """Match EXPRESSION against TEXT (or stdin) and print the fields as JSON."""
    matcher = build_matcher(
        expression,
        {
            "global": global_,
            "fieldMarkers": markers,
            "strictWhitespace": strict_whitespace,
            "weakParse": weak_parse,
        },
    )
    echo_matches(matcher, read_text(text))
