import pytest
from fastapi.testclient import TestClient

import seed_data
from agenda.config import Settings
from agenda.storage import Storage
from main import create_app


def make_settings(**overrides):
    valores = dict(
        environment="test",
        database_url="sqlite://",
        admin_username="admin",
        admin_password="admin123",
        seed_default_services=False,
        enforce_status_transitions=False,
    )
    valores.update(overrides)
    return Settings(**valores)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def storage(settings):
    storage = Storage(settings.database_url)
    seed_data.seed(storage, settings)
    yield storage
    storage.dispose()


@pytest.fixture
def client(settings, storage):
    app = create_app(settings=settings, storage=storage)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def novo_cliente(client):
    def _criar(**campos):
        dados = {"name": "Ana", "phone": "11999990000", "email": "ana@x.com"}
        dados.update(campos)
        response = client.post("/api/clients", json=dados)
        assert response.status_code == 201, response.text
        return response.json()["client"]
    return _criar


@pytest.fixture
def novo_servico(client):
    def _criar(**campos):
        dados = {"name": "Corte", "duration": "30", "price": "20.00", "active": "true"}
        dados.update(campos)
        response = client.post("/api/services", json=dados)
        assert response.status_code == 201, response.text
        return response.json()["service"]
    return _criar


@pytest.fixture
def novo_agendamento(client, novo_cliente, novo_servico):
    def _criar(**campos):
        dados = {"date": "2024-01-15", "time": "09:00"}
        dados.update(campos)
        if "client_id" not in dados:
            dados["client_id"] = novo_cliente(email=f"cliente{len(client.get('/api/clients').json())}@x.com")["id"]
        if "service_id" not in dados:
            dados["service_id"] = novo_servico()["id"]
        response = client.post("/api/appointments", json=dados)
        assert response.status_code == 201, response.text
        return response.json()["appointment"]
    return _criar
