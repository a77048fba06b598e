"""This module defines the 'query' command of the Licitax Advisor CLI."""

import json

import click
from licitax_advisor.models.queries import QUERIES


def _parse_params(params: tuple[str, ...]) -> dict[str, str]:
    """Parses repeated `key=value` options.

    Args:
        params: The raw options.

    Returns:
        The parameters, by name.

    Raises:
        click.BadParameter: If an option has no `=`.
    """
    parsed: dict[str, str] = {}
    for param in params:
        key, separator, value = param.partition("=")
        if not separator or not key:
            raise click.BadParameter(f"'{param}' is not in key=value form.", param_hint="--param")
        parsed[key.strip()] = value.strip()
    return parsed


@click.command("query")
@click.argument("name", type=click.Choice(sorted(QUERIES)))
@click.option("--param", "-p", "params", multiple=True, help="A query parameter as key=value; repeatable.")
def query(name: str, params: tuple[str, ...]) -> None:
    """Runs a Compras.gov.br query through the configured proxy.

    The answer is printed as is: formatted JSON when the proxy returned
    JSON, the raw text otherwise.

    Args:
        name: The query name.
        params: The query parameters.
    """
    from licitax_advisor.exceptions.resources import LicitaxError
    from licitax_advisor.services import ComprasGovService

    try:
        result = ComprasGovService().run(name, _parse_params(params))
    except LicitaxError as e:
        click.secho(f"{e.message} {e.error or ''}".strip(), fg="red")
        raise click.Abort() from e

    color = "green" if result.ok else "yellow"
    click.secho(f"Status: {result.status_code}", fg=color)
    if result.data is not None:
        click.echo(json.dumps(result.data, indent=2, ensure_ascii=False))
    elif result.text:
        click.echo(result.text)
