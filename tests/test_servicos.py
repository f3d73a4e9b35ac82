from dataclasses import replace

import pytest

import seed_data
from agenda.storage import Storage


def test_create_service_parses_text_numbers(client):
    response = client.post(
        "/api/services", json={"name": "Corte", "duration": "30", "price": "20.00", "active": "false"}
    )

    assert response.status_code == 201
    servico = response.json()["service"]
    assert servico["duration"] == 30
    assert servico["price"] == 20.0
    assert servico["active"] is False
    assert servico["description"] is None


def test_negative_or_non_numeric_values_are_rejected(client):
    negativo = client.post("/api/services", json={"name": "Corte", "duration": "-5", "price": "20"})
    texto = client.post("/api/services", json={"name": "Corte", "duration": "30", "price": "vinte"})

    assert negativo.status_code == 400
    assert texto.status_code == 400
    assert client.get("/api/services").json() == []


@pytest.mark.parametrize("campos", [
    {"duration": "30", "price": "inf"},
    {"duration": "30", "price": "Infinity"},
    {"duration": "30", "price": "NaN"},
    {"duration": "1000000000000000000000000000000", "price": "1"},
    {"duration": "1441", "price": "1"},
])
def test_out_of_range_values_are_rejected(client, campos):
    response = client.post("/api/services", json={"name": "Corte", **campos})

    assert response.status_code == 400
    assert response.json()["message"] == "Dados inválidos"
    assert client.get("/api/services").json() == []


def test_update_rejects_infinite_price(client, novo_servico):
    servico = novo_servico()

    response = client.put(f"/api/services/{servico['id']}", json={"price": "inf"})

    assert response.status_code == 400
    assert client.get(f"/api/services/{servico['id']}").json()["price"] == servico["price"]


def test_active_services_list(client, novo_servico):
    ativo = novo_servico()
    novo_servico(name="Barba", active="false")

    response = client.get("/api/services/active")

    assert response.status_code == 200
    assert [s["id"] for s in response.json()] == [ativo["id"]]


def test_soft_disable_keeps_service(client, novo_servico):
    servico = novo_servico()

    response = client.put(f"/api/services/{servico['id']}", json={"active": False})

    assert response.status_code == 200
    assert response.json()["service"]["active"] is False
    assert response.json()["service"]["price"] == 20.0
    assert client.get(f"/api/services/{servico['id']}").status_code == 200
    assert client.get("/api/services/active").json() == []


def test_get_update_delete_unknown_service(client):
    assert client.get("/api/services/nao-existe").status_code == 404
    assert client.put("/api/services/nao-existe", json={"name": "X"}).status_code == 404
    assert client.delete("/api/services/nao-existe").status_code == 404


def test_delete_service(client, novo_servico):
    servico = novo_servico()

    response = client.delete(f"/api/services/{servico['id']}")

    assert response.status_code == 200
    assert response.json()["message"] == "Serviço excluído com sucesso"
    assert client.get("/api/services").json() == []


def test_default_services_are_seeded_once(settings):
    storage = Storage()
    settings = replace(settings, seed_default_services=True)

    seed_data.seed(storage, settings)
    seed_data.seed(storage, settings)

    nomes = [s.name for s in storage.services.list()]
    assert nomes == [s.name for s in seed_data.DEFAULT_SERVICES]
    assert len(storage.users.list()) == 1
