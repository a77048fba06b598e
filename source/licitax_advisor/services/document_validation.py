"""This module defines the service that validates bid documents with Gemini.

The validation itself is delegated to the model. This service only decodes
the uploaded files, builds the prompt and guarantees a verdict: when the
model call fails, every document is reported invalid with the failure as
the reason.
"""

import base64
import binascii
import re
from collections.abc import Callable
from typing import Any

from google.auth.exceptions import GoogleAuthError
from google.genai import errors as genai_errors
from licitax_advisor.exceptions.resources import InvalidArgumentError
from licitax_advisor.models.document_validation import (
    DocumentPayload,
    DocumentValidity,
    ValidateBidDocumentsInput,
    ValidateBidDocumentsOutput,
)
from licitax_advisor.providers.ai import AiProvider, Attachment
from licitax_advisor.providers.logging import Logger, LoggingProvider
from licitax_advisor.services.base import parse_payload

DATA_URI_PATTERN = re.compile(
    r"^data:(?P<mime_type>[\w.+-]+/[\w.+-]+)(?:;[^,;]+=[^,;]+)*;base64,(?P<data>.*)$",
    re.DOTALL,
)
VALIDATION_FAILED_LABEL = "Validation process failed"

VALIDATION_PROMPT = """You are an AI assistant specialized in validating bid documents against specific criteria.

Given the following documents (identified by filename) and bid criteria, perform the following tasks:
1. **Completeness Check**: Determine if all documents explicitly required by the bid criteria are present among the
   provided documents. Set the 'completeness' field accordingly. List any seemingly required documents that are
   missing in the 'missingDocuments' field.
2. **Validity Check**: For EACH provided document, evaluate its content against the bid criteria. Determine if the
   document appears valid according to the rules (e.g., correct type, within expiration date if applicable, contains
   required information). Set the 'isValid' field for each document in the 'validityDetails' array. Use the
   document's filename as the 'documentName'. Provide a brief 'reasoning' if a document is deemed invalid or has
   issues.

Bid Criteria:
{bid_criteria}

Provided Documents: {filenames}

Return a JSON object strictly adhering to the specified output schema, including the 'completeness' status, the
'validityDetails' array (containing an object for each provided document), and the 'missingDocuments' array.
"""

ProviderFactory = Callable[[], AiProvider[ValidateBidDocumentsOutput]]


def decode_data_uri(document: DocumentPayload) -> Attachment:
    """Decodes a `data:<mimetype>;base64,<data>` URI into an attachment.

    Args:
        document: The uploaded document.

    Returns:
        The decoded attachment.

    Raises:
        InvalidArgumentError: If the URI is not a Base64 data URI.
    """
    match = DATA_URI_PATTERN.match(document.data_uri.strip())
    if not match:
        raise InvalidArgumentError(
            "Dados inválidos: dataUri.",
            f"'{document.filename}' is not a data:<mimetype>;base64,<data> URI.",
        )
    try:
        content = base64.b64decode(match.group("data"), validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidArgumentError("Dados inválidos: dataUri.", f"'{document.filename}': {e}") from e
    return Attachment(name=document.filename, mime_type=match.group("mime_type"), content=content)


def failed_verdict(request: ValidateBidDocumentsInput, reason: str) -> ValidateBidDocumentsOutput:
    """Builds the verdict reported when the model could not be consulted.

    Args:
        request: The validation request.
        reason: Why the validation failed.

    Returns:
        A verdict marking every document invalid.
    """
    return ValidateBidDocumentsOutput(
        completeness=False,
        validity_details=[
            DocumentValidity(
                document_name=document.filename,
                is_valid=False,
                reasoning=f"Error during validation: {reason}",
            )
            for document in request.documents
        ],
        missing_documents=[VALIDATION_FAILED_LABEL],
    )


class DocumentValidationService:
    """Validates a set of bid documents against free-text criteria."""

    logger: Logger

    def __init__(self, provider_factory: ProviderFactory | None = None) -> None:
        """Initializes the service.

        Args:
            provider_factory: Builds the AI provider. The provider is created
                per request so that a misconfigured backend only fails the
                requests that need it.
        """
        self.logger = LoggingProvider().get_logger()
        self.provider_factory = provider_factory or (lambda: AiProvider(ValidateBidDocumentsOutput))

    def validate(self, payload: Any) -> ValidateBidDocumentsOutput:
        """Validates the documents of a request.

        Args:
            payload: The request body, `{documents: [{filename, dataUri}], bidCriteria}`.

        Returns:
            The model's verdict, or the failure verdict if the model call failed.

        Raises:
            InvalidArgumentError: If the body is invalid or a data URI cannot be decoded.
        """
        request = parse_payload(ValidateBidDocumentsInput, payload)
        attachments = [decode_data_uri(document) for document in request.documents]
        prompt = VALIDATION_PROMPT.format(
            bid_criteria=request.bid_criteria,
            filenames=", ".join(document.filename for document in request.documents),
        )

        self.logger.info(f"Validating {len(attachments)} document(s) against the bid criteria.")
        try:
            verdict = self.provider_factory().get_structured_output(prompt, attachments)
        except (genai_errors.APIError, GoogleAuthError, ValueError) as e:
            self.logger.error(f"Document validation failed: {e}", exc_info=True)
            return failed_verdict(request, str(e))

        self.logger.info(f"Validation finished; completeness={verdict.completeness}.")
        return verdict
