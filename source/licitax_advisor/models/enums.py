"""This module defines the enumerations for the application."""

from enum import StrEnum


class BidStatus(StrEnum):
    """The lifecycle statuses of a tracked bid (licitação)."""

    AWAITING_ANALYSIS = "AGUARDANDO_ANALISE"
    IN_ANALYSIS = "EM_ANALISE"
    DOCUMENTATION_COMPLETE = "DOCUMENTACAO_CONCLUIDA"
    MISSING_DOCUMENTATION = "FALTA_DOCUMENTACAO"
    AWAITING_DISPUTE = "AGUARDANDO_DISPUTA"
    IN_HOMOLOGATION = "EM_HOMOLOGACAO"
    AWAITING_APPEAL = "AGUARDANDO_RECURSO"
    COUNTER_ARGUMENT_PERIOD = "EM_PRAZO_CONTRARRAZAO"
    HOMOLOGATED = "PROCESSO_HOMOLOGADO"
    CLOSED = "PROCESSO_ENCERRADO"
    APPEAL_OR_CHALLENGE = "RECURSO_IMPUGNACAO"


class DebtStatus(StrEnum):
    """The billing statuses of a debt (débito)."""

    PENDING = "PENDENTE"
    PAID = "PAGO"
    SENT_TO_FINANCE = "ENVIADO_FINANCEIRO"
    PAID_VIA_SETTLEMENT = "PAGO_VIA_ACORDO"

    @classmethod
    def settled_statuses(cls) -> frozenset["DebtStatus"]:
        """Returns the statuses a pending debt may transition to.

        Returns:
            The three post-pending statuses.
        """
        return frozenset({cls.PAID, cls.SENT_TO_FINANCE, cls.PAID_VIA_SETTLEMENT})


class DebtType(StrEnum):
    """Where a debt came from."""

    AD_HOC = "AVULSO"
    """Registered by hand through the finance screen."""

    BID = "LICITACAO"
    """Generated automatically when a bid is homologated."""


class CompanySize(StrEnum):
    """The legal size classification of a client company (enquadramento)."""

    MEI = "MEI"
    ME = "ME"
    EPP = "EPP"
    OTHER = "Demais"
