from __future__ import annotations

from conftest import as_user

AGENT = as_user("agent@example.com")
TENANT = as_user("tenant@example.com")
APPLICANT = as_user("buyer@example.com")
ADMIN = as_user("admin@example.com")


def _dossier(name: str = "Bob Buyer") -> dict:
    return {
        "personalInfo": {"fullName": name, "phone": "+1 (555) 444-5555"},
        "employment": {"employer": "Acme", "monthlyIncome": 15000},
    }


def test_health_and_root(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"
    assert "X-Request-ID" in resp.headers

    resp = client.get("/health", headers={"X-Request-ID": "req-abc"})
    assert resp.headers["X-Request-ID"] == "req-abc"
    assert client.get("/").json()["service"] == "PMS - Modern Property Suite"


def test_missing_identity_is_401(client):
    resp = client.get("/v1/properties")
    assert resp.status_code == 401
    assert resp.json() == {"detail": "Authentication required"}

    resp = client.get("/v1/properties", headers=as_user("ghost@example.com"))
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Account not found. Please register or check details."


def test_login_and_register(client):
    resp = client.post("/v1/auth/login", json={"email": "TENANT@example.com"})
    assert resp.status_code == 200
    assert resp.json()["assignedPropertyId"] == "p1"

    resp = client.post("/v1/auth/register", json={
        "name": "Dana", "email": "dana@example.com", "password": "pw", "role": "TENANT",
    })
    assert resp.status_code == 201

    resp = client.post("/v1/auth/register", json={
        "name": "Dana", "email": "DANA@example.com", "password": "pw",
    })
    assert resp.status_code == 409
    assert resp.json()["detail"] == "This email is already registered."

    resp = client.post("/v1/auth/register", json={
        "name": "Root", "email": "root@example.com", "password": "pw", "role": "ADMIN",
    })
    assert resp.status_code == 422


def test_role_scoped_property_listing(client):
    assert {p["id"] for p in client.get("/v1/properties", headers=ADMIN).json()} == {"p1", "p2", "p3"}
    assert [p["id"] for p in client.get("/v1/properties", headers=TENANT).json()] == ["p1"]
    assert client.get("/v1/properties", headers=APPLICANT).json() == []
    assert client.get("/v1/properties/p2", headers=TENANT).status_code == 404


def test_patch_with_null_enum_is_rejected(client):
    resp = client.patch("/v1/properties/p2", headers=AGENT, json={"category": None})
    assert resp.status_code == 422

    resp = client.patch("/v1/properties/p2", headers=AGENT, json={"type": "PENTHOUSE"})
    assert resp.status_code == 200
    assert resp.json()["type"] == "PENTHOUSE"
    assert resp.json()["category"] == "RESIDENTIAL"


def test_tenant_cannot_create_property(client):
    resp = client.post("/v1/properties", headers=TENANT, json={
        "name": "Shed", "location": "Back yard", "rent": 100,
    })
    assert resp.status_code == 403


def test_screening_to_lease_flow(client):
    available = client.get("/v1/properties/available/u1", headers=APPLICANT).json()
    assert [p["id"] for p in available] == ["p2", "p3"]

    resp = client.post("/v1/applications", headers=APPLICANT, json={
        "agentId": "u1", "details": _dossier(), "preferredPropertyId": "p2",
    })
    assert resp.status_code == 201
    application = resp.json()
    assert application["propertyId"] == "PENDING"
    assert application["riskScore"] == 98

    resp = client.post(f"/v1/applications/{application['id']}/decision", headers=AGENT, json={"status": "APPROVED"})
    assert resp.json()["status"] == "APPROVED"

    resp = client.post(f"/v1/applications/{application['id']}/decision", headers=AGENT, json={"status": "PENDING"})
    assert resp.status_code == 409

    tenants = client.get("/v1/properties/assignable-tenants", headers=AGENT).json()
    assert [u["id"] for u in tenants] == ["u3"]

    resp = client.post("/v1/properties/p2/assign", headers=AGENT, json={"tenantId": "u3"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["property"]["status"] == "OCCUPIED"
    assert body["agreement"]["version"] == 1

    resp = client.post("/v1/properties/p2/assign", headers=AGENT, json={"tenantId": "u3"})
    assert resp.status_code == 409

    agreements = client.get("/v1/agreements", headers=APPLICANT).json()
    assert [a["propertyId"] for a in agreements] == ["p2"]

    unread = client.get("/v1/notifications/unread-count", headers=APPLICANT).json()
    assert unread["unread"] == 2


def test_maintenance_flow(client):
    resp = client.post("/v1/maintenance", headers=TENANT, json={"issue": "Smoke coming from the oven"})
    assert resp.status_code == 201
    ticket = resp.json()
    assert ticket["priority"] == "EMERGENCY"
    assert ticket["propertyId"] == "p1"

    resp = client.put(f"/v1/maintenance/{ticket['id']}/status", headers=AGENT, json={"status": "RESOLVED"})
    assert resp.json()["status"] == "RESOLVED"

    resp = client.put(f"/v1/maintenance/{ticket['id']}/status", headers=TENANT, json={"status": "OPEN"})
    assert resp.status_code == 403

    resolved = client.get("/v1/maintenance", headers=TENANT, params={"status": "RESOLVED"}).json()
    assert [t["id"] for t in resolved] == [ticket["id"]]


def test_payments_and_dashboard(client):
    resp = client.post("/v1/payments/pay2/settle", headers=TENANT)
    assert resp.status_code == 200
    assert resp.json()["status"] == "paid"
    assert resp.json()["amount"] == 2500

    assert client.post("/v1/payments/pay2/settle", headers=TENANT).status_code == 409

    stats = client.get("/v1/payments/stats", headers=TENANT).json()
    assert stats == {"totalPaid": 5000, "outstanding": 2500, "pendingCount": 1}

    dashboard = client.get("/v1/dashboard", headers=TENANT).json()
    assert dashboard["role"] == "TENANT"
    assert dashboard["propertyName"] == "Sunset Apartments #402"
    assert dashboard["rentStatus"] == "Pending"
    assert dashboard["payments"]["pendingCount"] == 1

    dashboard = client.get("/v1/dashboard", headers=AGENT).json()
    assert dashboard["totalProperties"] == 3
    assert dashboard["collectedRevenue"] == 5000


def test_notification_inbox(client):
    assert client.post("/v1/notifications/n1/read", headers=TENANT).status_code == 404
    assert client.post("/v1/notifications/read-all", headers=AGENT).json() == {"updated": 1}
    assert client.get("/v1/notifications/unread-count", headers=TENANT).json() == {"unread": 1}
    assert client.delete("/v1/notifications/n2", headers=TENANT).status_code == 204
    assert client.get("/v1/notifications", headers=TENANT).json() == []


def test_lease_summary_endpoint(client):
    resp = client.post("/v1/agreements/a1/summary", headers=TENANT)
    assert resp.status_code == 200
    assert resp.json()["agreementId"] == "a1"
    assert resp.json()["summary"].startswith("- Lease agreement version 1")

    assert client.post("/v1/agreements/a1/summary", headers=APPLICANT).status_code == 404
