def test_create_employee_generates_code(client, company):
    r = client.post("/api/employees", json={"name": "New Hire", "company_id": company["id"]})
    assert r.status_code == 201, r.text
    emp = r.json()
    assert emp["employee_id_string"].startswith("EMP")
    assert emp["company_id"] == company["id"]


def test_employee_codes_differ(client, company):
    a = client.post("/api/employees", json={"name": "A", "company_id": company["id"]}).json()
    b = client.post("/api/employees", json={"name": "B", "company_id": company["id"]}).json()
    assert a["employee_id_string"] != b["employee_id_string"]


def test_list_filtered_by_company_newest_first(client, company):
    other = client.post("/api/companies", json={"name": "Other Co"}).json()
    first = client.post("/api/employees", json={"name": "First", "company_id": company["id"]}).json()
    second = client.post("/api/employees", json={"name": "Second", "company_id": company["id"]}).json()
    client.post("/api/employees", json={"name": "Elsewhere", "company_id": other["id"]})

    r = client.get("/api/employees", params={"company_id": company["id"]})
    assert r.status_code == 200
    rows = r.json()
    assert {row["company_id"] for row in rows} == {company["id"]}
    assert [row["id"] for row in rows] == [second["id"], first["id"]]


def test_list_without_filter_returns_everyone(client, company):
    other = client.post("/api/companies", json={"name": "Other Co"}).json()
    older = client.post("/api/employees", json={"name": "Older", "company_id": company["id"]}).json()
    newer = client.post("/api/employees", json={"name": "Newer", "company_id": other["id"]}).json()

    rows = client.get("/api/employees").json()
    ids = [row["id"] for row in rows]
    assert older["id"] in ids and newer["id"] in ids
    assert ids.index(newer["id"]) < ids.index(older["id"])
    assert ids[0] == newer["id"]


def test_get_employee(client, employee):
    r = client.get(f"/api/employees/{employee['id']}")
    assert r.status_code == 200
    assert r.json()["name"] == "Jane Roe"


def test_get_missing_employee_is_null(client):
    r = client.get("/api/employees/987654")
    assert r.status_code == 200
    assert r.json() is None
