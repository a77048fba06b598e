"""This module defines the Pydantic models for debts (débitos)."""

from licitax_advisor.models.enums import DebtStatus
from licitax_advisor.models.fields import IsoDatetime, RequiredText
from pydantic import BaseModel, ConfigDict, Field


class DebtCreate(BaseModel):
    """The payload accepted when registering an ad-hoc debt.

    Attributes:
        client_name: The name of the billed client.
        client_cnpj: The billed client's tax identifier, when known.
        description: What is being charged.
        amount: The amount charged, never negative.
        due_date: When the debt is due.
    """

    model_config = ConfigDict(populate_by_name=True)

    client_name: RequiredText = Field(alias="clienteNome")
    client_cnpj: str | None = Field(None, alias="clienteCnpj")
    description: RequiredText = Field(alias="descricao")
    amount: float = Field(ge=0, alias="valor")
    due_date: IsoDatetime = Field(alias="dataVencimento")


class DebtStatusUpdate(BaseModel):
    """The payload of a debt status transition."""

    status: DebtStatus


class Debt(BaseModel):
    """A debt as returned by the API."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    debt_type: str | None = Field(None, alias="tipoDebito")
    client_name: str | None = Field(None, alias="clienteNome")
    client_cnpj: str | None = Field(None, alias="clienteCnpj")
    description: str | None = Field(None, alias="descricao")
    amount: float | None = Field(None, alias="valor")
    due_date: str = Field(alias="dataVencimento")
    reference_date: str = Field(alias="dataReferencia")
    status: str | None = None
    bid_number: str | None = Field(None, alias="licitacaoNumero")
