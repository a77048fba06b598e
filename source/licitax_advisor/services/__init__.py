"""This module initializes the services package.

It also re-exports the services to provide a simpler, flatter import
structure for the web and CLI layers.
"""

from licitax_advisor.services.bids import BidsService
from licitax_advisor.services.clients import ClientsService
from licitax_advisor.services.compras_gov import ComprasGovService
from licitax_advisor.services.debts import DebtsService
from licitax_advisor.services.document_validation import DocumentValidationService
from licitax_advisor.services.documents import DocumentsService
from licitax_advisor.services.settings import SettingsService

__all__ = [
    "BidsService",
    "ClientsService",
    "ComprasGovService",
    "DebtsService",
    "DocumentValidationService",
    "DocumentsService",
    "SettingsService",
]
