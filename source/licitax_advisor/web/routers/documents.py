"""Client documents API router, including the AI validation endpoint."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from licitax_advisor.models.document_validation import ValidateBidDocumentsOutput
from licitax_advisor.models.documents import Document
from licitax_advisor.services import DocumentsService, DocumentValidationService
from licitax_advisor.web.dependencies import get_document_validation_service, get_documents_service

router = APIRouter(prefix="/documentos", tags=["documentos"])


@router.get("")
def list_documents(service: DocumentsService = Depends(get_documents_service)) -> list[Document]:  # noqa: B008
    """List every client document.

    Args:
        service: The documents service.

    Returns:
        The documents.
    """
    return service.list_documents()


@router.post("/validacao")
def validate_documents(
    payload: Any = Body(None),  # noqa: B008
    service: DocumentValidationService = Depends(get_document_validation_service),  # noqa: B008
) -> ValidateBidDocumentsOutput:
    """Validate bid documents against free-text criteria.

    Args:
        payload: The documents and the criteria.
        service: The document validation service.

    Returns:
        The validation verdict.
    """
    return service.validate(payload)


@router.get("/{document_id}")
def get_document(
    document_id: str,
    service: DocumentsService = Depends(get_documents_service),  # noqa: B008
) -> Document:
    """Fetch one client document.

    Args:
        document_id: The document id.
        service: The documents service.

    Returns:
        The document.
    """
    return service.get_document(document_id)


@router.post("", status_code=201)
def create_document(
    payload: Any = Body(None),  # noqa: B008
    service: DocumentsService = Depends(get_documents_service),  # noqa: B008
) -> Document:
    """Register a client document.

    Args:
        payload: The document fields.
        service: The documents service.

    Returns:
        The created document.
    """
    return service.create_document(payload)


@router.put("/{document_id}")
def update_document(
    document_id: str,
    payload: Any = Body(None),  # noqa: B008
    service: DocumentsService = Depends(get_documents_service),  # noqa: B008
) -> dict[str, str]:
    """Update a client document.

    Args:
        document_id: The document id.
        payload: The fields to change.
        service: The documents service.

    Returns:
        A confirmation message.
    """
    service.update_document(document_id, payload)
    return {"message": "Documento atualizado com sucesso."}


@router.delete("/{document_id}")
def delete_document(
    document_id: str,
    service: DocumentsService = Depends(get_documents_service),  # noqa: B008
) -> dict[str, str]:
    """Delete a client document.

    Args:
        document_id: The document id.
        service: The documents service.

    Returns:
        A confirmation message.
    """
    service.delete_document(document_id)
    return {"message": "Documento excluído com sucesso."}
