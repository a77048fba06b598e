"""Unit tests for the bids endpoints."""

from fastapi.testclient import TestClient


def _bid(client_id: str, start: str = "2024-05-01T13:00:00.000Z") -> dict:
    return {
        "clienteId": client_id,
        "numeroLicitacao": "PE 12/2024",
        "dataInicio": start,
        "dataMetaAnalise": "2024-04-28T18:00:00.000Z",
        "valorCobrado": 900,
    }


def test_create_and_list(client: TestClient, acme: dict) -> None:
    """Test that bids are created awaiting analysis and listed newest first."""
    first = client.post("/licitacoes", json=_bid(acme["id"], "2024-03-01T00:00:00Z"))
    second = client.post("/licitacoes", json=_bid(acme["id"], "2024-06-01T00:00:00Z"))

    assert first.status_code == 201
    assert first.json()["status"] == "AGUARDANDO_ANALISE"
    assert first.json()["clienteNome"] == "ACME Ltda"
    assert [bid["id"] for bid in client.get("/licitacoes").json()] == [second.json()["id"], first.json()["id"]]


def test_create_for_unknown_client(client: TestClient) -> None:
    """Test that a bid for an unknown client answers 404."""
    response = client.post("/licitacoes", json=_bid("ghost"))

    assert response.status_code == 404
    assert client.get("/licitacoes").json() == []


def test_homologation_creates_debt(client: TestClient, acme: dict) -> None:
    """Test that homologating a bid makes a pending debt appear."""
    bid = client.post("/licitacoes", json=_bid(acme["id"])).json()

    response = client.put(f"/licitacoes/{bid['id']}", json={"status": "PROCESSO_HOMOLOGADO"})

    assert response.json() == {"message": "Licitação atualizada com sucesso."}
    debts = client.get("/debitos").json()
    assert len(debts) == 1
    assert debts[0]["id"] == bid["id"]
    assert debts[0]["status"] == "PENDENTE"
    assert debts[0]["valor"] == 900
    assert debts[0]["clienteCnpj"] == acme["cnpj"]

    response = client.delete(f"/licitacoes/{bid['id']}")
    assert response.json() == {"message": "Licitação excluída com sucesso."}
    assert client.get("/debitos").json() == []


def test_update_with_invalid_status(client: TestClient, acme: dict) -> None:
    """Test that unknown bid statuses answer 400."""
    bid = client.post("/licitacoes", json=_bid(acme["id"])).json()

    response = client.put(f"/licitacoes/{bid['id']}", json={"status": "VENCIDA"})

    assert response.status_code == 400
    assert response.json()["message"] == "Dados inválidos: status."
