"""This module defines the Pydantic models for bids (licitações).

Inbound models carry timezone-aware datetimes, which is what the document
store persists. The outbound `Bid` model carries the same dates as ISO-8601
strings.
"""

from typing import Any

from licitax_advisor.models.enums import BidStatus
from licitax_advisor.models.fields import (
    IsoDatetime,
    OptionalIsoDatetime,
    RequiredText,
    UpdatableIsoDatetime,
    UpdatableText,
)
from pydantic import BaseModel, ConfigDict, Field

BID_DATE_FIELDS: tuple[str, ...] = (
    "dataInicio",
    "dataMetaAnalise",
    "dataHomologacao",
    "dataResultadoHabilitacao",
    "dataInicioRecursoHabilitacao",
    "prazoFinalRecursoHabilitacao",
    "dataInicioContrarrazoesHabilitacao",
    "prazoFinalContrarrazoesHabilitacao",
    "dataDecisaoFinalRecursoHabilitacao",
    "createdAt",
)
"""Top-level bid fields stored as timestamps, by wire name."""


class Comment(BaseModel):
    """A note left on a bid by a team member."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str | None = None
    text: str | None = Field(None, alias="texto")
    date: OptionalIsoDatetime = Field(None, alias="data")
    author: str | None = Field(None, alias="autor")


class DisputeMessage(BaseModel):
    """A single message captured in the dispute room log."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    timestamp: OptionalIsoDatetime = None


class DisputeLog(BaseModel):
    """The record of a live dispute session (sala de disputa)."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    started_at: OptionalIsoDatetime = Field(None, alias="iniciadaEm")
    finished_at: OptionalIsoDatetime = Field(None, alias="finalizadaEm")
    messages: list[DisputeMessage] = Field(default_factory=list, alias="mensagens")


class Author(BaseModel):
    """Who registered a bid."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    user_id: str | None = Field(None, alias="userId")
    username: str
    full_name: str | None = Field(None, alias="fullName")
    cpf: str | None = None


class BidFields(BaseModel):
    """The optional descriptive fields shared by the inbound bid models."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", use_enum_values=True)

    modality: str | None = Field(None, alias="modalidade")
    buying_agency: str | None = Field(None, alias="orgaoComprador")
    platform: str | None = Field(None, alias="plataforma")
    charged_amount: float | None = Field(None, ge=0, alias="valorCobrado")
    total_value: float | None = Field(None, ge=0, alias="valorTotalLicitacao")
    notes: str | None = Field(None, alias="observacoes")
    created_by: Author | None = Field(None, alias="createdBy")


class BidCreate(BidFields):
    """The payload accepted when registering a bid.

    Attributes:
        client_id: The id of the client the bid is prepared for.
        bid_number: The bid number as published by the buying agency.
        start_date: When the bid session starts.
        analysis_deadline: The internal deadline for the document analysis.
    """

    client_id: RequiredText = Field(alias="clienteId")
    bid_number: RequiredText = Field(alias="numeroLicitacao")
    start_date: IsoDatetime = Field(alias="dataInicio")
    analysis_deadline: IsoDatetime = Field(alias="dataMetaAnalise")


class BidUpdate(BidFields):
    """A partial update of a bid; only the fields sent are written."""

    client_id: UpdatableText = Field(None, alias="clienteId")
    bid_number: UpdatableText = Field(None, alias="numeroLicitacao")
    start_date: UpdatableIsoDatetime = Field(None, alias="dataInicio")
    analysis_deadline: UpdatableIsoDatetime = Field(None, alias="dataMetaAnalise")
    homologation_date: OptionalIsoDatetime = Field(None, alias="dataHomologacao")
    status: BidStatus | None = None
    checklist: dict[str, Any] | None = None
    comments: list[Comment] | None = Field(None, alias="comentarios")
    first_place_value: float | None = Field(None, alias="valorPrimeiroColocado")
    dispute_log: DisputeLog | None = Field(None, alias="disputaLog")
    qualification_result_date: OptionalIsoDatetime = Field(None, alias="dataResultadoHabilitacao")
    qualification_appeal_start: OptionalIsoDatetime = Field(None, alias="dataInicioRecursoHabilitacao")
    qualification_appeal_deadline: OptionalIsoDatetime = Field(None, alias="prazoFinalRecursoHabilitacao")
    counter_argument_start: OptionalIsoDatetime = Field(None, alias="dataInicioContrarrazoesHabilitacao")
    counter_argument_deadline: OptionalIsoDatetime = Field(None, alias="prazoFinalContrarrazoesHabilitacao")
    appeal_decision_date: OptionalIsoDatetime = Field(None, alias="dataDecisaoFinalRecursoHabilitacao")


class Bid(BaseModel):
    """A bid as returned by the API, with every date as an ISO-8601 string."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    client_id: str | None = Field(None, alias="clienteId")
    client_name: str | None = Field(None, alias="clienteNome")
    bid_number: str | None = Field(None, alias="numeroLicitacao")
    start_date: str = Field(alias="dataInicio")
    analysis_deadline: str = Field(alias="dataMetaAnalise")
    homologation_date: str | None = Field(None, alias="dataHomologacao")
    status: str | None = None
    checklist: dict[str, Any] = Field(default_factory=dict)
    comments: list[dict[str, Any]] = Field(default_factory=list, alias="comentarios")
