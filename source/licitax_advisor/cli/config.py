"""This module defines the 'config' command group for the Licitax Advisor CLI."""

import click


@click.group("config")
def config_group() -> None:
    """Groups commands related to configuration."""
    pass


@config_group.command("show")
@click.option("--show-secrets", is_flag=True, help="Show secret values without masking.")
@click.option("--yes", is_flag=True, help="Skip confirmation prompts.")
def show(show_secrets: bool, yes: bool) -> None:
    """Shows the effective configuration, read from the environment and .env.

    Args:
        show_secrets: If True, shows secret values without masking.
        yes: If True, skips confirmation prompts.
    """
    from licitax_advisor.providers.config import ConfigProvider
    from licitax_advisor.providers.secrets import display_value

    if show_secrets and not yes:
        click.confirm("Are you sure you want to show secret values?", abort=True)

    config = ConfigProvider.get_config()
    for key, value in config.model_dump().items():
        click.echo(f"{key}={display_value(key, value, show_secrets)}")
