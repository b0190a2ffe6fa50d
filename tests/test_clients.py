from datetime import datetime


def test_create_and_get_client(auth_client):
    resp = auth_client.post(
        "/api/clients",
        json={
            "name": "Construtora Horizonte Ltda",
            "type": "company",
            "email": "contato@horizonte.com.br",
            "company_document": "12.345.678/0001-90",
        },
    )
    assert resp.status_code == 201
    created = resp.json()
    assert created["id"]
    assert created["created_at"] and created["updated_at"]

    resp = auth_client.get(f"/api/clients/{created['id']}")
    assert resp.status_code == 200
    assert resp.json()["company_document"] == "12.345.678/0001-90"


def test_client_type_defaults_to_individual(make_client):
    assert make_client()["type"] == "individual"


def test_client_name_required(auth_client):
    assert auth_client.post("/api/clients", json={"type": "company"}).status_code == 422
    assert auth_client.post("/api/clients", json={"name": ""}).status_code == 422


def test_client_type_must_be_known(auth_client):
    resp = auth_client.post("/api/clients", json={"name": "X", "type": "government"})
    assert resp.status_code == 422


def test_list_filters(auth_client, make_client):
    make_client(name="Maria Souza", email="maria@example.com")
    make_client(name="Horizonte Ltda", type="company")
    make_client(name="João Lima", email="joao@souza.adv.br")

    companies = auth_client.get("/api/clients", params={"type": "company"}).json()
    assert [c["name"] for c in companies] == ["Horizonte Ltda"]

    found = auth_client.get("/api/clients", params={"search": "souza"}).json()
    assert {c["name"] for c in found} == {"Maria Souza", "João Lima"}


def test_list_newest_first(auth_client, make_client):
    make_client(name="Primeiro")
    make_client(name="Segundo")

    names = [c["name"] for c in auth_client.get("/api/clients").json()]
    assert names == ["Segundo", "Primeiro"]


def test_partial_update_refreshes_updated_at(auth_client, make_client):
    created = make_client(phone="11 99999-0000")

    resp = auth_client.patch(f"/api/clients/{created['id']}", json={"notes": "Prefere contato por e-mail"})
    assert resp.status_code == 200
    updated = resp.json()

    assert updated["notes"] == "Prefere contato por e-mail"
    assert updated["phone"] == "11 99999-0000"
    assert updated["name"] == created["name"]
    assert datetime.fromisoformat(updated["updated_at"]) > datetime.fromisoformat(created["updated_at"])
    assert updated["created_at"] == created["created_at"]


def test_update_rejects_null_for_required_column(auth_client, make_client):
    created = make_client()
    resp = auth_client.patch(f"/api/clients/{created['id']}", json={"name": None})
    assert resp.status_code == 422


def test_missing_client(auth_client):
    assert auth_client.get("/api/clients/nao-existe").status_code == 404
    assert auth_client.patch("/api/clients/nao-existe", json={"name": "X"}).status_code == 404
    assert auth_client.delete("/api/clients/nao-existe").status_code == 404


def test_delete_client(auth_client, make_client):
    created = make_client()

    assert auth_client.delete(f"/api/clients/{created['id']}").status_code == 200
    assert auth_client.get(f"/api/clients/{created['id']}").status_code == 404


def test_delete_referenced_client_conflicts(auth_client, make_client):
    created = make_client()
    resp = auth_client.post("/api/contracts", json={"title": "Honorários", "client_id": created["id"]})
    assert resp.status_code == 201

    resp = auth_client.delete(f"/api/clients/{created['id']}")
    assert resp.status_code == 409

    # the client and its contract are untouched
    assert auth_client.get(f"/api/clients/{created['id']}").status_code == 200
    contracts = auth_client.get("/api/contracts", params={"client_id": created["id"]}).json()
    assert len(contracts) == 1
