import pytest


@pytest.fixture
def nova_conta(client):
    def _criar(tipo, **campos):
        dados = {"description": "Consulta", "amount": "100.00", "due_date": "2024-01-20"}
        dados.update(campos)
        response = client.post(f"/api/accounts-{tipo}", json=dados)
        assert response.status_code == 201, response.text
        return response.json()["account"]
    return _criar


@pytest.mark.parametrize("tipo", ["receivable", "payable"])
def test_account_crud(client, nova_conta, tipo):
    conta = nova_conta(tipo, payment_method="", category="Serviços")
    url = f"/api/accounts-{tipo}/{conta['id']}"

    assert conta["status"] == "pendente"
    assert conta["amount"] == 100.0
    assert conta["payment_method"] is None
    assert client.get(url).json() == conta

    pago = client.put(url, json={"status": "pago", "payment_date": "2024-01-18", "payment_method": "pix"})
    assert pago.status_code == 200
    assert pago.json()["account"]["payment_date"] == "2024-01-18"
    assert pago.json()["account"]["description"] == "Consulta"

    assert client.delete(url).status_code == 200
    assert client.delete(url).status_code == 404
    assert client.get(url).status_code == 404


def test_receivables_and_payables_are_separate(client, nova_conta):
    nova_conta("receivable")

    assert len(client.get("/api/accounts-receivable").json()) == 1
    assert client.get("/api/accounts-payable").json() == []


def test_invalid_account_is_rejected(client):
    response = client.post(
        "/api/accounts-payable", json={"description": "Aluguel", "amount": "-1", "due_date": "2024-01-20"}
    )
    sem_vencimento = client.post("/api/accounts-payable", json={"description": "Aluguel", "amount": "1"})

    assert response.status_code == 400
    assert sem_vencimento.status_code == 400


@pytest.mark.parametrize("tipo", ["receivable", "payable"])
def test_infinite_amount_is_rejected(client, nova_conta, tipo):
    response = client.post(
        f"/api/accounts-{tipo}", json={"description": "Aluguel", "amount": "Infinity", "due_date": "2024-01-20"}
    )
    conta = nova_conta(tipo)
    alterada = client.put(f"/api/accounts-{tipo}/{conta['id']}", json={"amount": "inf"})

    assert response.status_code == 400
    assert alterada.status_code == 400
    assert client.get(f"/api/accounts-{tipo}").json() == [conta]
    resumo = client.get("/api/financial/summary", params={"reference_date": "2024-01-01"}).json()
    assert resumo["projected_balance"] is not None


def test_list_by_status(client, nova_conta):
    nova_conta("receivable", status="pago")
    atrasada = nova_conta("receivable", status="atrasado")

    response = client.get("/api/accounts-receivable/status/atrasado")

    assert [c["id"] for c in response.json()] == [atrasada["id"]]


def test_financial_summary(client, nova_conta):
    nova_conta("receivable", amount="150.00", status="pago")
    nova_conta("receivable", amount="200.00", due_date="2024-01-10")  # vencida
    nova_conta("receivable", amount="50.00", due_date="2024-02-10")
    nova_conta("receivable", amount="999.00", status="cancelado")
    nova_conta("payable", amount="85.00", status="pago")
    nova_conta("payable", amount="300.00", status="atrasado")

    response = client.get("/api/financial/summary", params={"reference_date": "2024-01-15"})

    assert response.status_code == 200
    resumo = response.json()
    assert resumo["reference_date"] == "2024-01-15"
    assert resumo["receivables"] == {
        "total": 400.0, "paid": 150.0, "pending": 250.0, "overdue": 200.0, "count": 3,
    }
    assert resumo["payables"] == {
        "total": 385.0, "paid": 85.0, "pending": 300.0, "overdue": 300.0, "count": 2,
    }
    assert resumo["balance"] == 65.0
    assert resumo["projected_balance"] == 15.0


def test_empty_financial_summary(client):
    resumo = client.get("/api/financial/summary").json()

    assert resumo["balance"] == 0
    assert resumo["receivables"]["count"] == 0
