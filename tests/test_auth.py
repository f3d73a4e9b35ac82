import pytest


def test_login_with_seeded_admin(client):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["user"]["username"] == "admin"
    assert body["user"]["id"]
    assert "password" not in body["user"]
    assert body["message"] == "Login realizado com sucesso"


@pytest.mark.parametrize("credenciais", [
    {"username": "admin", "password": "wrong"},
    {"username": "ninguem", "password": "admin123"},
    {"username": "Admin", "password": "admin123"},
])
def test_invalid_credentials(client, credenciais):
    response = client.post("/api/auth/login", json=credenciais)

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Usuário ou senha inválidos"}


@pytest.mark.parametrize("corpo", [{}, {"username": "admin"}, {"username": "", "password": "x"}])
def test_malformed_login(client, corpo):
    response = client.post("/api/auth/login", json=corpo)

    assert response.status_code == 400
    assert response.json()["message"] == "Dados inválidos"
