"""This module defines the input and verdict models of the document validation flow."""

from pydantic import BaseModel, ConfigDict, Field


class DocumentPayload(BaseModel):
    """A document sent for validation.

    Attributes:
        filename: The name of the document file.
        data_uri: The file content as a `data:<mimetype>;base64,<data>` URI.
    """

    model_config = ConfigDict(populate_by_name=True)

    filename: str = Field(min_length=1, description="The name of the document file.")
    data_uri: str = Field(
        alias="dataUri",
        description="The document content as a data URI with a MIME type and Base64 encoding.",
    )


class ValidateBidDocumentsInput(BaseModel):
    """The documents to validate and the criteria to validate them against."""

    model_config = ConfigDict(populate_by_name=True)

    documents: list[DocumentPayload] = Field(min_length=1)
    bid_criteria: str = Field(
        min_length=1,
        alias="bidCriteria",
        description="The criteria for the bid, including required documents and their validity rules.",
    )


class DocumentValidity(BaseModel):
    """The verdict for a single document."""

    model_config = ConfigDict(populate_by_name=True)

    document_name: str = Field(
        alias="documentName",
        description="The name or identifier of the document provided in the input.",
    )
    is_valid: bool = Field(
        alias="isValid",
        description="Whether the document is considered valid based on the criteria.",
    )
    reasoning: str | None = Field(
        None,
        description="Reason if the document is invalid or requires attention.",
    )


class ValidateBidDocumentsOutput(BaseModel):
    """The overall verdict of a validation run."""

    model_config = ConfigDict(populate_by_name=True)

    completeness: bool = Field(
        description="Whether all documents required by the bid criteria seem to be present.",
    )
    validity_details: list[DocumentValidity] = Field(
        alias="validityDetails",
        description="The validity status and details for each document provided in the input.",
    )
    missing_documents: list[str] = Field(
        alias="missingDocuments",
        description="Documents required by the criteria that were not found in the input.",
    )
