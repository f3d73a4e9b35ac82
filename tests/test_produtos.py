import pytest


@pytest.fixture
def novo_produto(client):
    def _criar(**campos):
        dados = {"name": "Luvas", "category": "consumo", "quantity": "10", "min_quantity": "5", "unit": "caixa"}
        dados.update(campos)
        response = client.post("/api/products", json=dados)
        assert response.status_code == 201, response.text
        return response.json()["product"]
    return _criar


def test_create_product_with_form_defaults(client):
    response = client.post(
        "/api/products",
        json={
            "name": "Shampoo",
            "description": "",
            "category": "venda",
            "quantity": "0",
            "min_quantity": "5",
            "unit": "ml",
            "cost_price": "",
            "sale_price": "35.90",
            "supplier": "",
            "barcode": "",
            "active": "true",
        },
    )

    assert response.status_code == 201
    produto = response.json()["product"]
    assert produto["description"] is None
    assert produto["cost_price"] is None
    assert produto["sale_price"] == 35.9
    assert produto["quantity"] == 0
    assert produto["active"] is True
    assert produto["created_at"]
    assert client.get(f"/api/products/{produto['id']}").json() == produto


@pytest.mark.parametrize("campos", [
    {"category": "servico"},
    {"quantity": "-1"},
    {"unit": ""},
    {"sale_price": "-10"},
    {"quantity": "inf"},
    {"min_quantity": "Infinity"},
    {"cost_price": "NaN"},
    {"sale_price": "1e400"},
])
def test_invalid_product_is_rejected(client, campos):
    dados = {"name": "Luvas", "category": "consumo", "unit": "caixa"}
    dados.update(campos)

    response = client.post("/api/products", json=dados)

    assert response.status_code == 400
    assert response.json()["message"] == "Dados inválidos"
    assert client.get("/api/products").json() == []


def test_low_stock(client, novo_produto):
    novo_produto(name="Luvas", quantity="10", min_quantity="5")
    alcool = novo_produto(name="Álcool", quantity="2", min_quantity="5")
    toalha = novo_produto(name="Toalha", quantity="5", min_quantity="5")

    response = client.get("/api/products/low-stock")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == [alcool["id"], toalha["id"]]


def test_category_and_active_filters(client, novo_produto):
    luvas = novo_produto(category="consumo")
    shampoo = novo_produto(name="Shampoo", category="venda")
    novo_produto(name="Secador", category="uso", active=False)

    assert [p["id"] for p in client.get("/api/products/category/venda").json()] == [shampoo["id"]]
    assert [p["id"] for p in client.get("/api/products/active").json()] == [luvas["id"], shampoo["id"]]
    assert client.get("/api/products/category/outra").status_code == 400


def test_restock_moves_product_out_of_low_stock(client, novo_produto):
    alcool = novo_produto(name="Álcool", quantity="2")

    response = client.put(f"/api/products/{alcool['id']}", json={"quantity": "20"})

    assert response.status_code == 200
    assert response.json()["product"]["quantity"] == 20
    assert response.json()["product"]["name"] == "Álcool"
    assert client.get("/api/products/low-stock").json() == []


def test_delete_and_unknown_product(client, novo_produto):
    luvas = novo_produto()

    assert client.delete(f"/api/products/{luvas['id']}").status_code == 200
    assert client.delete(f"/api/products/{luvas['id']}").status_code == 404
    assert client.get(f"/api/products/{luvas['id']}").status_code == 404
    assert client.put(f"/api/products/{luvas['id']}", json={"quantity": 1}).status_code == 404
