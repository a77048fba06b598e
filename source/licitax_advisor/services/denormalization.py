"""This module resolves the client name copied onto bids and documents.

The name is copied at write time and never refreshed afterwards: renaming a
client leaves the names already copied onto its bids and documents as they
were. Only the resolver writes the copied name; a name sent by the caller
is discarded.
"""

from collections.abc import Callable
from typing import Any

from licitax_advisor.exceptions.resources import NotFoundError
from licitax_advisor.repositories.clients import ClientsRepository

CLIENT_NAME_FIELD = "clienteNome"
UNKNOWN_CLIENT_NAME = "Cliente Desconhecido"

ClientLookup = Callable[[str], dict[str, Any] | None]


def resolve_client_name(lookup: ClientLookup, client_id: str) -> str:
    """Resolves the display name of a client.

    Args:
        lookup: Returns the stored client fields for an id, or None.
        client_id: The referenced client id.

    Returns:
        The client's registered name, or a placeholder when it has none.

    Raises:
        NotFoundError: If the client does not exist.
    """
    client = lookup(client_id)
    if client is None:
        raise NotFoundError(f"Cliente com ID {client_id} não encontrado.")
    return client.get("razaoSocial") or UNKNOWN_CLIENT_NAME


class ClientNameResolver:
    """Resolves client names against the clients collection."""

    def __init__(self, clients_repository: ClientsRepository) -> None:
        """Initializes the resolver.

        Args:
            clients_repository: The repository used to look clients up.
        """
        self.clients_repository = clients_repository

    def resolve(self, client_id: str) -> str:
        """Resolves the display name of a stored client.

        Args:
            client_id: The referenced client id.

        Returns:
            The client's registered name.
        """
        return resolve_client_name(self.clients_repository.get, client_id)
