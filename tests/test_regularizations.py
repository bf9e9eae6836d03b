def _attendance(client, employee_id):
    return client.post("/api/attendance/mark", json={"employee_id": employee_id}).json()


def _apply(client, employee_id, attendance_id, reason="forgot to check in"):
    r = client.post("/api/regularizations/apply", json={
        "employee_id": employee_id, "attendance_id": attendance_id, "reason": reason,
    })
    assert r.status_code == 201, r.text
    return r.json()


def test_apply_is_pending(client, employee):
    att = _attendance(client, employee["id"])
    reg = _apply(client, employee["id"], att["id"])
    assert reg["status"] == "pending"
    assert reg["attendance_id"] == att["id"]


def test_list_includes_employee_details(client, employee):
    att = _attendance(client, employee["id"])
    reg = _apply(client, employee["id"], att["id"])
    rows = client.get("/api/regularizations").json()
    row = next(r for r in rows if r["id"] == reg["id"])
    assert row["name"] == employee["name"]
    assert row["employee_id_string"] == employee["employee_id_string"]


def test_both_filters_together(client, employee, company):
    att = _attendance(client, employee["id"])
    pending = _apply(client, employee["id"], att["id"])
    approved = _apply(client, employee["id"], att["id"], reason="late badge")
    client.patch(f"/api/regularizations/{approved['id']}/approve", json={"approved_by": 1})

    rows = client.get("/api/regularizations", params={
        "company_id": company["id"], "status": "approved",
    }).json()
    assert [r["id"] for r in rows] == [approved["id"]]
    assert pending["id"] not in [r["id"] for r in rows]


def test_single_filter_is_ignored(client, employee):
    att = _attendance(client, employee["id"])
    _apply(client, employee["id"], att["id"])

    everything = client.get("/api/regularizations").json()
    status_only = client.get("/api/regularizations", params={"status": "approved"}).json()
    company_only = client.get("/api/regularizations", params={"company_id": employee["company_id"]}).json()
    assert status_only == everything
    assert company_only == everything
    assert any(r["status"] == "pending" for r in status_only)


def test_approve(client, employee):
    att = _attendance(client, employee["id"])
    reg = _apply(client, employee["id"], att["id"])
    r = client.patch(f"/api/regularizations/{reg['id']}/approve", json={"approved_by": 4})
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "approved"
    assert body["approved_by"] == 4
    assert body["updated_at"] is not None


def test_approve_missing_regularization_is_null(client):
    r = client.patch("/api/regularizations/999999/approve", json={"approved_by": 1})
    assert r.status_code == 200
    assert r.json() is None
