"""Format command: join raw components into a data or display string."""

from __future__ import annotations

import click

from ..exceptions import InvalidArgumentError
from ..grammar import Name
from .parse import delimiter_option


@click.command("format")
@click.argument("components", nargs=-1, type=str)
@delimiter_option
@click.option(
    "--display/--data",
    default=False,
    help="Join raw components without masking (display form).",
)
def format_cmd(components: tuple[str, ...], delimiter: str, display: bool):
    """Join COMPONENTS into a single name string.

    By default the components are masked so the output parses back into the
    same name. With --display they are joined verbatim.
    """
    try:
        name = Name(components, delimiter)
    except InvalidArgumentError as exc:
        raise click.BadParameter(str(exc), param_hint="'--delimiter'") from exc
    click.echo(name.as_string() if display else name.as_data_string())


__all__ = ["format_cmd"]
