"""This module defines the repository for debts (débitos)."""

from licitax_advisor.repositories.base import FirestoreRepository


class DebtsRepository(FirestoreRepository):
    """Handles store operations for the `debitos` collection.

    Debts generated by a homologated bid are stored under the bid's id, so a
    bid has at most one generated debt.
    """

    collection_name = "debitos"
