"""Parse command: split a data string into its raw components."""

from __future__ import annotations

import json

import click

from ..constants import DEFAULT_DELIMITER, DELIMITER_ENV
from ..exceptions import InvalidArgumentError
from ..grammar import parse_name


def delimiter_option(func):
    return click.option(
        "-d",
        "--delimiter",
        default=DEFAULT_DELIMITER,
        show_default=True,
        envvar=DELIMITER_ENV,
        help="Delimiter character separating components.",
    )(func)


@click.command("parse")
@click.argument("source", type=str)
@delimiter_option
@click.option("--json", "as_json", is_flag=True, help="Emit components as a JSON list")
def parse_cmd(source: str, delimiter: str, as_json: bool):
    """Print the raw components of SOURCE, one per line."""
    try:
        name = parse_name(source, delimiter)
    except InvalidArgumentError as exc:
        raise click.BadParameter(str(exc), param_hint="'--delimiter'") from exc
    if as_json:
        click.echo(json.dumps(list(name.components)))
        return
    for component in name.components:
        click.echo(component)


@click.command("hash")
@click.argument("source", type=str)
@delimiter_option
def hash_cmd(source: str, delimiter: str):
    """Print the hash code of the name parsed from SOURCE."""
    try:
        name = parse_name(source, delimiter)
    except InvalidArgumentError as exc:
        raise click.BadParameter(str(exc), param_hint="'--delimiter'") from exc
    click.echo(str(name.hash_code()))


__all__ = ["parse_cmd", "hash_cmd", "delimiter_option"]
