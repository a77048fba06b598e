"""This module defines the parameter models for the Compras.gov.br open-data queries.

Each query class names the upstream endpoint it targets and validates the
parameters the consultation forms collect. `to_query_params` produces the
exact query string the proxy expects: camelCase names converted to
snake_case, dates as `yyyy-MM-dd`, booleans as `true`/`false`, unset
values dropped.
"""

import re
from datetime import date
from typing import Annotated, Any, ClassVar, Literal

from licitax_advisor.providers.date import DateProvider
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

_UPPERCASE = re.compile(r"[A-Z]")


def _one_of(*allowed: int) -> AfterValidator:
    def check(value: int) -> int:
        if value not in allowed:
            raise ValueError(f"deve ser um dos valores: {', '.join(map(str, allowed))}.")
        return value

    return AfterValidator(check)


WaiverModality = Annotated[int, _one_of(6, 7)]
"""Dispensa (6) or inexigibilidade (7)."""

RdcModality = Annotated[int, _one_of(3, 4)]
"""RDC in person (3) or electronic (4)."""


def camel_to_snake(name: str) -> str:
    """Converts a camelCase parameter name to the proxy's snake_case form.

    Every uppercase letter becomes `_` plus its lowercase form, so
    `codigoNCM` becomes `codigo_n_c_m`.

    Args:
        name: The camelCase name.

    Returns:
        The snake_case name.
    """
    return _UPPERCASE.sub(lambda match: f"_{match.group(0).lower()}", name)


class ProxyQuery(BaseModel):
    """Base class of every query forwarded to the procurement data proxy."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    ENDPOINT: ClassVar[str]
    TITLE: ClassVar[str]

    pagina: int = Field(1, ge=1)
    tamanho_pagina: int = Field(10, ge=1, le=500)

    def to_query_params(self) -> dict[str, str]:
        """Serializes the parameters for the proxy, including the `endpoint` key.

        Returns:
            The query string parameters.
        """
        params: dict[str, str] = {}
        for name, value in self.model_dump(by_alias=True, exclude_none=True).items():
            if isinstance(value, bool):
                params[camel_to_snake(name)] = "true" if value else "false"
            elif isinstance(value, date):
                params[camel_to_snake(name)] = DateProvider.format_date(value)
            else:
                params[camel_to_snake(name)] = str(value)
        params["endpoint"] = self.ENDPOINT
        return params


def _check_range(start: Any, end: Any, label: str) -> None:
    if start is not None and end is not None and end < start:
        raise ValueError(f"{label}: a data final deve ser maior ou igual à data inicial.")


class LegacyBidsQuery(ProxyQuery):
    """Bids under Lei 8.666/93."""

    ENDPOINT = "/modulo-legado/1_consultarLicitacao"
    TITLE = "Consultar Licitações (Lei 8.666/93)"

    uasg: int | None = None
    numero_aviso: int | None = None
    modalidade: int | None = None
    data_publicacao_inicial: date
    data_publicacao_final: date

    @model_validator(mode="after")
    def check_dates(self) -> "LegacyBidsQuery":
        _check_range(self.data_publicacao_inicial, self.data_publicacao_final, "Data de publicação")
        return self


class LegacyBidItemsQuery(ProxyQuery):
    """Items of bids under Lei 8.666/93."""

    ENDPOINT = "/modulo-legado/2_consultarItemLicitacao"
    TITLE = "Consultar Itens de Licitações"

    uasg: int | None = None
    numero_aviso: int | None = None
    modalidade: int
    codigo_item_material: int | None = None
    codigo_item_servico: int | None = None
    cnpj_fornecedor: str | None = None
    cpf_vencedor: str | None = None


class AuctionsQuery(ProxyQuery):
    """Reverse auctions (pregões)."""

    ENDPOINT = "/modulo-legado/3_consultarPregoes"
    TITLE = "Consultar Pregões"

    co_uasg: int | None = None
    numero: int | None = None
    dt_data_edital_inicial: date
    dt_data_edital_final: date

    @model_validator(mode="after")
    def check_dates(self) -> "AuctionsQuery":
        _check_range(self.dt_data_edital_inicial, self.dt_data_edital_final, "Data do edital")
        return self


class AuctionItemsQuery(ProxyQuery):
    """Items of homologated reverse auctions."""

    ENDPOINT = "/modulo-legado/4_consultarItensPregoes"
    TITLE = "Consultar Itens de Pregões"

    co_uasg: int | None = None
    dt_hom_inicial: date
    dt_hom_final: date

    @model_validator(mode="after")
    def check_dates(self) -> "AuctionItemsQuery":
        _check_range(self.dt_hom_inicial, self.dt_hom_final, "Data de homologação")
        return self


class DirectPurchasesQuery(ProxyQuery):
    """Purchases made without a bid (dispensa and inexigibilidade)."""

    ENDPOINT = "/modulo-legado/5_consultarComprasSemLicitacao"
    TITLE = "Consultar Compras sem Licitação"

    dt_ano_aviso: int
    co_uasg: int | None = None
    co_modalidade_licitacao: WaiverModality | None = None


class DirectPurchaseItemsQuery(ProxyQuery):
    """Items of purchases made without a bid."""

    ENDPOINT = "/modulo-legado/6_consultarCompraItensSemLicitacao"
    TITLE = "Consultar Itens de Compras sem Licitação"

    dt_ano_aviso_licitacao: int
    co_uasg: int | None = None
    co_modalidade_licitacao: WaiverModality | None = None
    co_conjunto_materiais: int | None = None
    co_servico: int | None = None
    nu_cpf_cnpj_fornecedor: str | None = None


class RdcQuery(ProxyQuery):
    """Differentiated public procurement regime (RDC)."""

    ENDPOINT = "/modulo-legado/7_consultarRdc"
    TITLE = "Consultar RDC"

    data_publicacao_min: date
    data_publicacao_max: date
    uasg: int | None = None
    modalidade: RdcModality | None = None
    numero_aviso: int | None = None
    objeto: str | None = None

    @model_validator(mode="after")
    def check_dates(self) -> "RdcQuery":
        _check_range(self.data_publicacao_min, self.data_publicacao_max, "Data de publicação")
        return self


class PncpContractingQuery(ProxyQuery):
    """Contracting processes published on PNCP under Lei 14.133/2021."""

    ENDPOINT = "/modulo-contratacoes/1_consultarContratacoes_PNCP_14133"
    TITLE = "Consultar Contratações (PNCP Lei 14.133/2021)"

    data_publicacao_pncp_inicial: date
    data_publicacao_pncp_final: date
    codigo_modalidade: int
    unidade_orgao_codigo_unidade: int | None = None
    orgao_entidade_cnpj: str | None = None
    item_categoria_id_pncp: int | None = None
    criterio_julgamento_id_pncp: int | None = None
    tipo_instrumento_convocatorio_id: int | None = None
    amparo_legal_id: int | None = None
    modo_disputa_id: int | None = None
    situacao_compra_id: int | None = None
    sequencial_compra: int | None = None
    ano_compra: int | None = None
    data_atualizacao_pncp: date | None = None
    contratacao_desconsiderada: bool | None = None

    @model_validator(mode="after")
    def check_dates(self) -> "PncpContractingQuery":
        _check_range(self.data_publicacao_pncp_inicial, self.data_publicacao_pncp_final, "Data de publicação")
        return self


class PncpContractingItemsQuery(ProxyQuery):
    """Items of contracting processes published on PNCP."""

    ENDPOINT = "/modulo-contratacoes/2_consultarItensContratacoes_PNCP_14133"
    TITLE = "Consultar Itens de Contratações (PNCP Lei 14.133/2021)"

    material_ou_servico: Literal["M", "S"]
    codigo_classe: int
    codigo_grupo: int
    unidade_orgao_codigo_unidade: int | None = None
    orgao_entidade_cnpj: str | None = None
    situacao_compra_item: str | None = None
    cod_item_catalogo: int | None = None
    tem_resultado: bool | None = None
    cod_fornecedor: str | None = None
    data_inclusao_pncp_inicial: date | None = None
    data_inclusao_pncp_final: date | None = None
    data_atualizacao_pncp: date | None = None
    bps: bool | None = None
    margem_preferencia_normal: bool | None = None
    codigo_ncm: str | None = Field(None, alias="codigoNCM")

    @model_validator(mode="after")
    def check_dates(self) -> "PncpContractingItemsQuery":
        _check_range(self.data_inclusao_pncp_inicial, self.data_inclusao_pncp_final, "Data de inclusão")
        return self


class PncpItemResultsQuery(ProxyQuery):
    """Results of items of contracting processes published on PNCP."""

    ENDPOINT = "/modulo-contratacoes/3_consultarResultadoItensContratacoes_PNCP_14133"
    TITLE = "Consultar Resultado dos Itens (PNCP Lei 14.133/2021)"

    data_resultado_pncp_inicial: date
    data_resultado_pncp_final: date
    unidade_orgao_codigo_unidade: str | None = None
    ni_fornecedor: str | None = None
    codigo_pais: str | None = None
    porte_fornecedor_id: int | None = None
    natureza_juridica_id: str | None = None
    situacao_compra_item_resultado_id: int | None = None
    valor_unitario_homologado_inicial: float | None = None
    valor_unitario_homologado_final: float | None = None
    valor_total_homologado_inicial: float | None = None
    valor_total_homologado_final: float | None = None
    aplicacao_margem_preferencia: bool | None = None
    aplicacao_beneficio_meepp: bool | None = None
    aplicacao_criterio_desempate: bool | None = None

    @model_validator(mode="after")
    def check_dates(self) -> "PncpItemResultsQuery":
        _check_range(self.data_resultado_pncp_inicial, self.data_resultado_pncp_final, "Data de resultado")
        return self


QUERIES: dict[str, type[ProxyQuery]] = {
    "licitacoes": LegacyBidsQuery,
    "itens-licitacoes": LegacyBidItemsQuery,
    "pregoes": AuctionsQuery,
    "itens-pregoes": AuctionItemsQuery,
    "compras-sem-licitacao": DirectPurchasesQuery,
    "itens-compras-sem-licitacao": DirectPurchaseItemsQuery,
    "rdc": RdcQuery,
    "contratacoes": PncpContractingQuery,
    "itens-contratacoes": PncpContractingItemsQuery,
    "resultado-itens": PncpItemResultsQuery,
}
"""The available queries, keyed by the name used in URLs and on the command line."""


class ProxyResponse(BaseModel):
    """The proxy's answer, passed through for display without interpretation.

    Attributes:
        ok: Whether the proxy answered with a 2xx status.
        status_code: The HTTP status code returned by the proxy.
        data: The decoded JSON body, or None when the body is not JSON.
        text: The raw body when it could not be decoded as JSON.
    """

    model_config = ConfigDict(populate_by_name=True)

    ok: bool
    status_code: int = Field(alias="statusCode")
    data: Any = None
    text: str | None = None
