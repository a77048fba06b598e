"""This module defines the Pydantic models for clients.

A client is the company a bid is prepared for. The store is schemaless, so
unknown fields sent by the UI are kept as they are.
"""

from licitax_advisor.models.enums import CompanySize
from licitax_advisor.models.fields import RequiredText, UpdatableText
from pydantic import BaseModel, ConfigDict, Field


class ClientFields(BaseModel):
    """The optional registration fields shared by every client model."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", use_enum_values=True)

    trade_name: str | None = Field(None, alias="nomeFantasia")
    state_registration: str | None = Field(None, alias="inscricaoEstadual")

    street: str | None = Field(None, alias="enderecoRua")
    number: str | None = Field(None, alias="enderecoNumero")
    complement: str | None = Field(None, alias="enderecoComplemento")
    district: str | None = Field(None, alias="enderecoBairro")
    city: str | None = Field(None, alias="enderecoCidade")
    postal_code: str | None = Field(None, alias="enderecoCep")

    email: str | None = None
    phone: str | None = Field(None, alias="telefone")
    company_size: CompanySize | None = Field(None, alias="enquadramento")

    bank: str | None = Field(None, alias="banco")
    account: str | None = Field(None, alias="conta")
    branch: str | None = Field(None, alias="agencia")

    partner_name: str | None = Field(None, alias="socioNome")
    partner_cpf: str | None = Field(None, alias="socioCpf")
    partner_rg: str | None = Field(None, alias="socioRg")
    copy_company_address: bool | None = Field(None, alias="copiarEnderecoEmpresa")

    notes: str | None = Field(None, alias="observacoes")


class ClientCreate(ClientFields):
    """The payload accepted when registering a client.

    Attributes:
        legal_name: The registered company name (razão social).
        cnpj: The tax identifier, unique across all clients.
    """

    legal_name: RequiredText = Field(alias="razaoSocial")
    cnpj: RequiredText


class ClientUpdate(ClientFields):
    """A partial update of a client; only the fields sent are written."""

    legal_name: UpdatableText = Field(None, alias="razaoSocial")
    cnpj: UpdatableText = None


class Client(ClientCreate):
    """A client as returned by the API."""

    id: str
