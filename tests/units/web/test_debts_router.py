"""Unit tests for the debts endpoints."""

from fastapi.testclient import TestClient


def test_create_and_settle(client: TestClient) -> None:
    """Test registering an ad-hoc debt and settling it."""
    created = client.post(
        "/debitos",
        json={"clienteNome": "ACME Ltda", "descricao": "Consultoria", "valor": 0, "dataVencimento": "2024-07-10"},
    )
    assert created.status_code == 201
    debt = created.json()
    assert debt["tipoDebito"] == "AVULSO"
    assert debt["status"] == "PENDENTE"
    assert debt["dataVencimento"] == "2024-07-10T00:00:00.000Z"

    response = client.put(f"/debitos/{debt['id']}", json={"status": "ENVIADO_FINANCEIRO"})
    assert response.json() == {"message": "Status do débito atualizado com sucesso."}
    assert client.get("/debitos").json()[0]["status"] == "ENVIADO_FINANCEIRO"


def test_invalid_status(client: TestClient) -> None:
    """Test that moving a debt back to pending answers 400."""
    response = client.put("/debitos/any", json={"status": "PENDENTE"})

    assert response.status_code == 400
    assert response.json()["message"] == "Status inválido fornecido."


def test_missing_debt(client: TestClient) -> None:
    """Test that settling an unknown debt answers 404."""
    assert client.put("/debitos/nope", json={"status": "PAGO"}).status_code == 404
