"""Company routes: list, detail, create, update, delete."""


# ─── Read ────────────────────────────────────────────────────────

def test_list_companies_returns_code_and_name_only(client, test_company):
    res = client.get("/companies")

    assert res.status_code == 200
    assert res.json() == {
        "companies": [{"code": test_company["code"], "name": test_company["name"]}],
    }


def test_list_companies_keeps_insertion_order(client, test_company):
    client.post("/companies", json={"code": "m1", "name": "M One", "description": "d"})
    client.post("/companies", json={"code": "m2", "name": "M Two", "description": "d"})

    res = client.get("/companies")

    codes = [c["code"] for c in res.json()["companies"]]
    assert codes == ["test", "m1", "m2"]


def test_list_companies_empty(client):
    res = client.get("/companies")
    assert res.status_code == 200
    assert res.json() == {"companies": []}


def test_get_company(client, test_company):
    res = client.get(f"/companies/{test_company['code']}")

    assert res.status_code == 200
    assert res.json() == {"company": {**test_company, "invoices": []}}


def test_get_company_includes_invoice_ids(client, test_invoice):
    second = client.post("/invoices", json={"comp_code": "test", "amt": 20}).json()

    res = client.get("/companies/test")

    assert res.json()["company"]["invoices"] == [test_invoice["id"], second["invoice"]["id"]]


def test_get_company_not_found(client):
    res = client.get("/companies/0")

    assert res.status_code == 404
    assert res.json() == {"error": {"message": "Cannot find company for 0!", "status": 404}}


# ─── Create ──────────────────────────────────────────────────────

def test_create_company(client):
    new_company = {"code": "new", "name": "new company", "description": "new description"}

    res = client.post("/companies", json=new_company)

    assert res.status_code == 201
    assert res.json() == {"company": new_company}


def test_created_company_round_trips(client):
    client.post("/companies", json={"code": "acme", "name": "Acme", "description": "d"})

    res = client.get("/companies/acme")

    assert res.json() == {
        "company": {"code": "acme", "name": "Acme", "description": "d", "invoices": []},
    }


def test_create_company_rejects_empty_body(client, test_company):
    res = client.post("/companies", json={})

    assert res.status_code == 400
    assert res.json()["error"]["status"] == 400
    # nothing partial was written
    assert len(client.get("/companies").json()["companies"]) == 1


def test_create_company_rejects_missing_description(client):
    res = client.post("/companies", json={"code": "x", "name": "X"})

    assert res.status_code == 400
    assert "description" in res.json()["error"]["message"]
    assert client.get("/companies/x").status_code == 404


def test_create_company_missing_fields_legacy_status_is_500(legacy_client):
    # Legacy mode keeps the old generic server error
    res = legacy_client.post("/companies", json={})

    assert res.status_code == 500
    assert res.json()["error"]["status"] == 500


def test_create_company_duplicate_code(client, test_company):
    res = client.post(
        "/companies",
        json={"code": "test", "name": "Other", "description": "other"},
    )

    assert res.status_code == 400
    assert client.get("/companies/test").json()["company"]["name"] == "TestCompany"


# ─── Update ──────────────────────────────────────────────────────

def test_update_company(client, test_company):
    updated = {"name": "updated company", "description": "updated description"}

    res = client.put(f"/companies/{test_company['code']}", json=updated)

    assert res.status_code == 200
    assert res.json() == {"company": {"code": test_company["code"], **updated}}


def test_update_company_ignores_code_in_body(client, test_company):
    res = client.put(
        "/companies/test",
        json={"code": "hijack", "name": "N", "description": "D"},
    )

    assert res.json()["company"]["code"] == "test"
    assert client.get("/companies/hijack").status_code == 404


def test_update_company_not_found(client):
    res = client.put("/companies/0", json={"name": "n", "description": "d"})

    assert res.status_code == 404
    assert res.json()["error"]["status"] == 404


# ─── Delete ──────────────────────────────────────────────────────

def test_delete_company(client, test_company):
    res = client.delete(f"/companies/{test_company['code']}")

    assert res.status_code == 200
    assert res.json() == {"status": "deleted"}
    assert client.get("/companies/test").status_code == 404


def test_delete_company_not_found(client):
    res = client.delete("/companies/0")

    assert res.status_code == 404


def test_delete_company_cascades_to_invoices(client, test_invoice):
    res = client.delete("/companies/test")

    assert res.status_code == 200
    assert client.get(f"/invoices/{test_invoice['id']}").status_code == 404
    assert client.get("/invoices").json() == {"invoices": []}


# ─── Ordering and update edge cases ──────────────────────────────

def test_list_order_follows_insertion_not_code(client):
    for code in ("zz", "aa", "mm"):
        client.post("/companies", json={"code": code, "name": f"Co {code}", "description": "d"})

    codes = [c["code"] for c in client.get("/companies").json()["companies"]]
    assert codes == ["zz", "aa", "mm"]


def test_rows_seeded_outside_the_api_list_last(client, engine, test_company):
    with engine.connect() as conn:
        conn.exec_driver_sql(
            "INSERT INTO companies (code, name, description) VALUES ('seed', 'Seeded', 's')"
        )
        conn.commit()
    client.post("/companies", json={"code": "later", "name": "Later", "description": "d"})

    codes = [c["code"] for c in client.get("/companies").json()["companies"]]
    assert codes == ["test", "later", "seed"]


def test_update_company_duplicate_name(client, test_company):
    client.post("/companies", json={"code": "other", "name": "Other", "description": "d"})

    res = client.put("/companies/other", json={"name": "TestCompany", "description": "d"})

    assert res.status_code == 400
    assert res.json()["error"]["status"] == 400
    assert client.get("/companies/other").json()["company"]["name"] == "Other"


def test_update_company_missing_description(client, test_company):
    res = client.put("/companies/test", json={"name": "Renamed"})

    assert res.status_code == 400
    assert "description" in res.json()["error"]["message"]
    assert client.get("/companies/test").json()["company"]["name"] == "TestCompany"
