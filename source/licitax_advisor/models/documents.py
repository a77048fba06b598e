"""This module defines the Pydantic models for client compliance documents."""

from licitax_advisor.models.fields import OptionalIsoDatetime, RequiredText, UpdatableText
from pydantic import BaseModel, ConfigDict, Field


class DocumentCreate(BaseModel):
    """The payload accepted when registering a client document.

    Attributes:
        client_id: The id of the client the document belongs to.
        document_type: The kind of document, e.g. `CND Federal`.
        expiration_date: When the document expires, if it does.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    client_id: RequiredText = Field(alias="clienteId")
    document_type: RequiredText = Field(alias="tipoDocumento")
    expiration_date: OptionalIsoDatetime = Field(None, alias="dataVencimento")


class DocumentUpdate(BaseModel):
    """A partial update of a client document."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    client_id: UpdatableText = Field(None, alias="clienteId")
    document_type: UpdatableText = Field(None, alias="tipoDocumento")
    expiration_date: OptionalIsoDatetime = Field(None, alias="dataVencimento")


class Document(BaseModel):
    """A client document as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    client_id: str | None = Field(None, alias="clienteId")
    client_name: str | None = Field(None, alias="clienteNome")
    document_type: str | None = Field(None, alias="tipoDocumento")
    expiration_date: str | None = Field(None, alias="dataVencimento")
