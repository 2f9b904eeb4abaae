from __future__ import annotations

from datetime import date


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.get_json()["backend"] == "memory"


def test_list_employees_joined_with_account(client):
    res = client.get("/api/employees")

    assert res.status_code == 200
    rows = {r["id"]: r for r in res.get_json()}
    assert rows["EMP001"]["accountDisplay"] == "Mr Admin User (Admin)"
    assert rows["EMP001"]["hireDate"] == "2025-01-01"


def test_get_missing_employee_is_404(client):
    res = client.get("/api/employees/EMP999")

    assert res.status_code == 404
    assert res.get_json() == {"message": "Employee not found"}


def test_create_account_validation_is_400(client):
    res = client.post("/api/accounts", json={"email": "bad"})

    assert res.status_code == 400
    body = res.get_json()
    assert body["errors"]["email"] == "Invalid email format"
    assert "title" in body["errors"]


def test_account_crud(client):
    payload = {
        "title": "Dr",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "role": "User",
        "status": "Active",
    }
    assert client.post("/api/accounts", json=payload).status_code == 201
    assert client.post("/api/accounts", json=payload).status_code == 400

    res = client.put("/api/accounts/ada@example.com", json={**payload, "status": "Inactive"})
    assert res.status_code == 200
    assert res.get_json()["status"] == "Inactive"

    available = [a["email"] for a in client.get("/api/accounts/available").get_json()]
    assert available == ["ada@example.com"]

    res = client.delete("/api/accounts/ada@example.com")
    assert res.get_json() == {"message": "Account deleted successfully"}
    assert client.delete("/api/accounts/ada@example.com").status_code == 200


def test_employee_create_transfer_and_workflow(client):
    client.post(
        "/api/accounts",
        json={
            "title": "Ms",
            "firstName": "Grace",
            "lastName": "Hopper",
            "email": "grace@example.com",
            "role": "User",
            "status": "Active",
        },
    )
    assert client.get("/api/employees/next-id").get_json() == {"id": "EMP003"}

    res = client.post(
        "/api/employees",
        json={
            "account": "grace@example.com",
            "department": "Engineering",
            "position": "Engineer",
            "hireDate": "2024-01-15",
            "status": "Active",
        },
    )
    assert res.status_code == 201
    assert res.get_json()["id"] == "EMP003"

    res = client.post("/api/employees/EMP003/transfer", json={"toDepartment": "Marketing"})
    assert res.status_code == 201
    transfer = res.get_json()
    assert transfer["id"] == "TRF001"
    assert transfer["date"] == date.today().strftime("%Y-%m-%d")

    by_dept = [e["id"] for e in client.get("/api/employees/department/Marketing").get_json()]
    assert by_dept == ["EMP002", "EMP003"]

    counts = {d["name"]: d["employeeCount"] for d in client.get("/api/departments").get_json()}
    assert counts["Engineering"] == 1
    assert counts["Marketing"] == 2

    res = client.put("/api/transfers/TRF001/status", json={"status": "Approved"})
    assert res.status_code == 200
    assert res.get_json()["status"] == "Approved"

    workflow = client.get("/api/employees/EMP003/workflow?page=0").get_json()
    assert workflow["total"] == 2
    assert workflow["pageSize"] == 5
    assert [i["type"] for i in workflow["items"]] == ["transfer", "onboarding"]
    assert workflow["items"][0]["actions"] == ["Pending", "Approved", "Disapproved"]


def test_transfer_status_rejects_unknown_value(client):
    client.post("/api/employees/EMP001/transfer", json={"toDepartment": "Marketing"})

    res = client.put("/api/transfers/TRF001/status", json={"status": "Later"})

    assert res.status_code == 400


def test_request_crud(client):
    assert client.get("/api/requests/next-id").get_json() == {"id": "REQ003"}

    res = client.post(
        "/api/requests",
        json={
            "type": "Leave",
            "employeeId": "EMP002",
            "description": "Conference",
            "requestDate": "2025-04-20",
            "items": [{"name": "Days", "quantity": 3}],
        },
    )
    assert res.status_code == 201
    assert res.get_json()["status"] == "Pending"

    res = client.put("/api/requests/REQ003/status", json={"status": "Disapproved"})
    assert res.get_json()["status"] == "Disapproved"

    mine = [r["id"] for r in client.get("/api/employees/EMP002/requests").get_json()]
    assert mine == ["REQ001", "REQ003"]

    assert client.delete("/api/requests/REQ003").status_code == 200
    assert client.get("/api/requests/REQ003").status_code == 404


def test_department_crud(client):
    res = client.post("/api/departments", json={"name": "Legal", "description": "Contracts"})
    assert res.status_code == 201
    assert res.get_json() == {"name": "Legal", "description": "Contracts", "employeeCount": 0}

    res = client.put("/api/departments/Legal", json={"description": "Contracts and compliance"})
    assert res.get_json()["description"] == "Contracts and compliance"

    assert client.put("/api/departments/Nowhere", json={"description": "x"}).status_code == 404
    assert client.delete("/api/departments/Legal").get_json() == {"message": "Department deleted successfully"}


def test_storage_failure_becomes_generic_500(app, client, monkeypatch):
    container = app.extensions["hr_admin"]

    def boom():
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(container.employees_repo, "list_all", boom)

    res = client.get("/api/employees")

    assert res.status_code == 500
    assert res.get_json() == {"message": "Failed to load employees"}


def test_unknown_route_is_json_404(client):
    res = client.get("/api/nothing-here")

    assert res.status_code == 404
    assert "message" in res.get_json()


def test_malformed_employee_id_is_400(client):
    res = client.post(
        "/api/employees",
        json={
            "id": "bob",
            "account": "admin@example.com",
            "department": "Engineering",
            "position": "Engineer",
            "hireDate": "2024-01-15",
            "status": "Active",
        },
    )

    assert res.status_code == 400
    assert "id" in res.get_json()["errors"]
    assert client.get("/api/employees/bob").status_code == 404


def test_failed_mirror_write_leaves_store_unchanged(monkeypatch, tmp_path):
    monkeypatch.setenv("APP_ENV", "testing")
    from hr_admin.main import create_app

    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    client = create_app({"STORAGE_BACKEND": "memory", "STORAGE_FILE": str(blocker / "store.json")}).test_client()

    res = client.post("/api/departments", json={"name": "Legal", "description": "Contracts"})

    assert res.status_code == 500
    assert res.get_json() == {"message": "Failed to create department"}
