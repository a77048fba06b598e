"""This module defines the 'store' command group for the Licitax Advisor CLI."""

import click


@click.group("store")
def store_group() -> None:
    """Groups commands related to the Firestore document store."""
    pass


@store_group.command("check")
def check() -> None:
    """Checks that the document store can be initialized with the configured credentials."""
    from licitax_advisor.providers.firestore import FirestoreProvider

    status = FirestoreProvider.initialize()
    if not status.ready:
        click.secho(f"Firestore is unavailable: {status.error}", fg="red")
        raise click.Abort()
    click.secho(f"Firestore is ready (credentials: {status.credential_source}).", fg="green")
