from decimal import Decimal


def _tx(client, **overrides):
    payload = {"description": "Honorários", "amount": "1000.00", "type": "income"}
    payload.update(overrides)
    resp = client.post("/api/transactions", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_create_transaction_defaults_date(auth_client, admin):
    tx = _tx(auth_client)
    assert tx["date"] is not None
    assert tx["created_by"] == admin.id
    assert Decimal(tx["amount"]) == Decimal("1000")


def test_transaction_type_required(auth_client):
    resp = auth_client.post("/api/transactions", json={"description": "X", "amount": "10"})
    assert resp.status_code == 422


def test_transaction_type_must_be_known(auth_client):
    resp = auth_client.post("/api/transactions", json={"description": "X", "amount": "10", "type": "refund"})
    assert resp.status_code == 422


def test_list_by_date_desc_and_filter(auth_client):
    _tx(auth_client, description="Antigo", date="2026-01-10T00:00:00")
    _tx(auth_client, description="Novo", date="2026-03-10T00:00:00")
    _tx(auth_client, description="Aluguel", type="expense", amount="300", date="2026-02-10T00:00:00")

    all_tx = auth_client.get("/api/transactions").json()
    assert [t["description"] for t in all_tx] == ["Novo", "Aluguel", "Antigo"]

    expenses = auth_client.get("/api/transactions", params={"type": "expense"}).json()
    assert [t["description"] for t in expenses] == ["Aluguel"]


def test_summary(auth_client):
    _tx(auth_client, amount="1500.50")
    _tx(auth_client, amount="500")
    _tx(auth_client, type="expense", amount="700.25")

    summary = auth_client.get("/api/transactions/summary").json()
    assert Decimal(summary["income"]) == Decimal("2000.50")
    assert Decimal(summary["expense"]) == Decimal("700.25")
    assert Decimal(summary["balance"]) == Decimal("1300.25")


def test_summary_with_period(auth_client):
    _tx(auth_client, amount="100", date="2026-01-15T00:00:00")
    _tx(auth_client, amount="200", date="2026-02-15T00:00:00")

    summary = auth_client.get(
        "/api/transactions/summary",
        params={"start": "2026-02-01T00:00:00", "end": "2026-03-01T00:00:00"},
    ).json()
    assert Decimal(summary["income"]) == Decimal("200")
    assert Decimal(summary["expense"]) == Decimal("0")


def test_summary_empty(auth_client):
    summary = auth_client.get("/api/transactions/summary").json()
    assert Decimal(summary["balance"]) == Decimal("0")


def test_transaction_with_missing_project_is_bad_request(auth_client):
    resp = auth_client.post(
        "/api/transactions",
        json={"description": "X", "amount": "1", "type": "income", "project_id": "nao-existe"},
    )
    assert resp.status_code == 400


def test_update_and_delete(auth_client):
    tx = _tx(auth_client)

    resp = auth_client.patch(f"/api/transactions/{tx['id']}", json={"amount": "1200"})
    assert Decimal(resp.json()["amount"]) == Decimal("1200")

    resp = auth_client.patch(f"/api/transactions/{tx['id']}", json={"type": None})
    assert resp.status_code == 422

    assert auth_client.delete(f"/api/transactions/{tx['id']}").status_code == 200
    assert auth_client.get(f"/api/transactions/{tx['id']}").status_code == 404


def test_date_cannot_be_cleared(auth_client):
    tx = _tx(auth_client, date="2026-02-10T00:00:00")

    resp = auth_client.patch(f"/api/transactions/{tx['id']}", json={"date": None})
    assert resp.status_code == 422

    summary = auth_client.get(
        "/api/transactions/summary",
        params={"start": "2026-02-01T00:00:00", "end": "2026-03-01T00:00:00"},
    ).json()
    assert Decimal(summary["income"]) == Decimal("1000")
