"""This module initializes the CLI application."""

import click
from licitax_advisor.cli.config import config_group
from licitax_advisor.cli.queries import query
from licitax_advisor.cli.store import store_group
from licitax_advisor.cli.web import web_group
from licitax_advisor.providers.logging import LoggingProvider


def create_cli() -> click.Group:
    """Create and configure the main CLI group with all subcommands.

    The root group only sets up logging; the web server, configuration,
    store maintenance and procurement query commands hang off it.

    Returns:
        The main Click command group for the application.
    """

    @click.group()
    @click.option(
        "--log-level",
        type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
        help="Override the default log level for this command.",
    )
    def cli(log_level: str | None) -> None:
        """A command-line interface for the Licitax Advisor service.

        Args:
            log_level: The desired logging level.
        """
        LoggingProvider().get_logger(level_override=log_level)

    cli.add_command(web_group)
    cli.add_command(config_group)
    cli.add_command(store_group)
    cli.add_command(query)

    return cli
