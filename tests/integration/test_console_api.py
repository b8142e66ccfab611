# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for the console API endpoints."""

from datetime import datetime, timedelta, timezone

ADMIN = {"X-Actor-Profile": "1"}
MANAGER = {"X-Actor-Profile": "2"}
EMPLOYEE = {"X-Actor-Profile": "3"}


def add_entity(client, kind, fields, headers=ADMIN):
    """Create an entity through the add modal and return the screen."""
    client.get(f"/api/v1/screens/{kind}", headers=headers)
    client.post(f"/api/v1/screens/{kind}/modal/add", headers=headers)
    response = client.post(f"/api/v1/screens/{kind}/submit-add", json=fields, headers=headers)
    assert response.status_code == 200
    return response.json()


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestSessionEndpoints:
    """Tests for /api/v1/session."""

    def test_requires_session(self, client):
        """Test that screens require an open session."""
        response = client.get("/api/v1/screens/group", headers=ADMIN)
        assert response.status_code == 401

    def test_open_session_sets_cookie(self, client):
        response = client.post("/api/v1/session")
        assert response.status_code == 201
        assert response.cookies["session"] == response.json()["session_id"]

    def test_unknown_session(self, client):
        client.cookies.set("session", "forged")
        response = client.get("/api/v1/screens/group", headers=ADMIN)
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or expired session"

    def test_close_session(self, session_client):
        response = session_client.delete("/api/v1/session")
        assert response.status_code == 200

        response = session_client.get("/api/v1/screens/group", headers=ADMIN)
        assert response.status_code == 401

    def test_idle_session_expires(self, session_client, monkeypatch):
        """Test that a session idle past the ttl is rejected."""
        store = session_client.app.state.sessions
        monkeypatch.setattr(
            store, "_clock", lambda: datetime.now(timezone.utc) + timedelta(days=1)
        )

        response = session_client.get("/api/v1/screens/group", headers=ADMIN)

        assert response.status_code == 401
        assert store.session_count == 0


class TestScreenAccess:
    """Tests for screen visibility."""

    def test_admin_sees_companies(self, session_client):
        response = session_client.get("/api/v1/screens/company", headers=ADMIN)

        assert response.status_code == 200
        data = response.json()
        assert data["kind"] == "company"
        assert data["entities"] == []
        assert data["actions"] == ["view", "add", "edit", "toggle"]
        assert data["active_modal"]["kind"] == "none"

    def test_manager_is_redirected_from_companies(self, session_client):
        response = session_client.get(
            "/api/v1/screens/company", headers=MANAGER, follow_redirects=False
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/dashboard"

    def test_missing_profile_is_redirected(self, session_client):
        response = session_client.get("/api/v1/screens/user", follow_redirects=False)
        assert response.status_code == 303

    def test_malformed_profile_is_redirected(self, session_client):
        response = session_client.get(
            "/api/v1/screens/user",
            headers={"X-Actor-Profile": "root"},
            follow_redirects=False,
        )
        assert response.status_code == 303

    def test_employee_sees_read_only_users(self, session_client):
        response = session_client.get("/api/v1/screens/user", headers=EMPLOYEE)

        assert response.status_code == 200
        assert response.json()["actions"] == ["view"]

    def test_unknown_kind(self, session_client):
        response = session_client.get("/api/v1/screens/invoice", headers=ADMIN)
        assert response.status_code == 422

    def test_screen_must_be_mounted(self, session_client):
        response = session_client.post("/api/v1/screens/company/modal/add", headers=ADMIN)
        assert response.status_code == 409

    def test_unmount(self, session_client):
        session_client.get("/api/v1/screens/group", headers=ADMIN)

        response = session_client.delete("/api/v1/screens/group", headers=ADMIN)
        assert response.json()["message"] == "Screen unmounted"

        response = session_client.delete("/api/v1/screens/group", headers=ADMIN)
        assert response.json()["message"] == "Screen was not mounted"


class TestCompanyScreen:
    """Tests for the add, edit and toggle flows over HTTP."""

    def test_add_company(self, session_client):
        data = add_entity(session_client, "company", {"name": "Acme", "taxId": "123"})

        assert data["total"] == 1
        assert data["entities"][0]["name"] == "Acme"
        assert data["entities"][0]["is_active"] is True
        assert data["active_modal"]["kind"] == "none"

        notifications = session_client.get("/api/v1/notifications").json()
        assert notifications[-1]["kind"] == "success"
        assert notifications[-1]["message"] == "Company Acme added"

    def test_add_company_validation(self, session_client):
        data = add_entity(session_client, "company", {"name": ""})

        assert data["total"] == 0
        assert data["active_modal"]["kind"] == "add"
        assert set(data["field_errors"]) == {"name", "taxId"}

    def test_submit_without_modal_is_ignored(self, session_client):
        session_client.get("/api/v1/screens/company", headers=ADMIN)

        response = session_client.post(
            "/api/v1/screens/company/submit-add",
            json={"name": "Acme", "taxId": "123"},
            headers=ADMIN,
        )

        assert response.json()["total"] == 0

    def test_edit_company(self, session_client):
        data = add_entity(session_client, "company", {"name": "Acme", "taxId": "123"})
        company_id = data["entities"][0]["company_id"]

        response = session_client.post(
            f"/api/v1/screens/company/modal/edit/{company_id}", headers=ADMIN
        )
        assert response.json()["active_modal"]["kind"] == "edit"
        assert response.json()["active_modal"]["target"]["company_id"] == company_id

        response = session_client.post(
            f"/api/v1/screens/company/submit-edit/{company_id}",
            json={"phone": "+1 555 0100"},
            headers=ADMIN,
        )
        data = response.json()
        assert data["entities"][0]["phone"] == "+1 555 0100"
        assert data["active_modal"]["kind"] == "none"

    def test_toggle_company(self, session_client):
        data = add_entity(session_client, "company", {"name": "Acme", "taxId": "123"})
        company_id = data["entities"][0]["company_id"]

        session_client.post(f"/api/v1/screens/company/modal/toggle/{company_id}", headers=ADMIN)
        response = session_client.post(
            f"/api/v1/screens/company/confirm-toggle/{company_id}", headers=ADMIN
        )

        assert response.json()["entities"][0]["is_active"] is False

    def test_unknown_entity(self, session_client):
        session_client.get("/api/v1/screens/company", headers=ADMIN)

        response = session_client.post(
            "/api/v1/screens/company/modal/edit/c-missing", headers=ADMIN
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Company not found"

    def test_search(self, session_client):
        add_entity(session_client, "company", {"name": "Acme", "taxId": "1"})
        session_client.post("/api/v1/screens/company/modal/add", headers=ADMIN)
        session_client.post(
            "/api/v1/screens/company/submit-add",
            json={"name": "Globex", "taxId": "2"},
            headers=ADMIN,
        )

        response = session_client.get("/api/v1/screens/company?search=GLOB", headers=ADMIN)

        data = response.json()
        assert data["search_term"] == "GLOB"
        assert data["total"] == 2
        assert [c["name"] for c in data["entities"]] == ["Globex"]

    def test_close_modal(self, session_client):
        session_client.get("/api/v1/screens/company", headers=ADMIN)
        session_client.post("/api/v1/screens/company/modal/add", headers=ADMIN)

        response = session_client.delete("/api/v1/screens/company/modal", headers=ADMIN)

        assert response.json()["active_modal"]["kind"] == "none"


class TestUserScreen:
    """Tests for rank gating over HTTP."""

    def test_manager_cannot_edit_administrator(self, session_client):
        add_entity(
            session_client, "user", {"name": "Alice", "email": "alice@example.com", "profile": 1}
        )
        session_client.post("/api/v1/screens/user/modal/add", headers=ADMIN)
        data = session_client.post(
            "/api/v1/screens/user/submit-add",
            json={"name": "Erin", "email": "erin@example.com", "profile": 3},
            headers=ADMIN,
        ).json()
        ids = {u["name"]: u["user_id"] for u in data["entities"]}

        response = session_client.post(
            f"/api/v1/screens/user/modal/edit/{ids['Alice']}", headers=MANAGER
        )
        assert response.json()["active_modal"]["kind"] == "none"

        response = session_client.post(
            f"/api/v1/screens/user/modal/edit/{ids['Erin']}", headers=MANAGER
        )
        assert response.json()["active_modal"]["kind"] == "edit"

    def test_profile_change_applies_to_mounted_screen(self, session_client):
        session_client.get("/api/v1/screens/user", headers=ADMIN)

        response = session_client.post("/api/v1/screens/user/modal/add", headers=EMPLOYEE)

        assert response.json()["active_modal"]["kind"] == "none"
        assert response.json()["actions"] == ["view"]


class TestGroupScreen:
    """Tests for the group detail view over HTTP."""

    def test_group_detail(self, session_client):
        add_entity(
            session_client, "user", {"name": "Mark", "email": "mark@example.com", "profile": 2}
        )
        data = add_entity(
            session_client,
            "group",
            {"name": "Engineering", "description": "Builds things", "userIds": [1]},
        )
        group_id = data["entities"][0]["group_id"]

        response = session_client.post(
            f"/api/v1/screens/group/modal/detail/{group_id}", headers=EMPLOYEE
        )

        modal = response.json()["active_modal"]
        assert modal["kind"] == "view_detail"
        assert modal["loading"] is False
        assert [m["name"] for m in modal["target"]["users"]] == ["Mark"]


class TestNotificationEndpoints:
    """Tests for /api/v1/notifications."""

    def test_list_empty(self, client):
        response = client.get("/api/v1/notifications")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_and_list(self, client):
        response = client.post(
            "/api/v1/notifications", json={"message": "Saved", "kind": "success"}
        )
        assert response.status_code == 201
        created = response.json()
        assert created["message"] == "Saved"

        listed = client.get("/api/v1/notifications").json()
        assert [n["id"] for n in listed] == [created["id"]]

    def test_default_kind_is_info(self, client):
        response = client.post("/api/v1/notifications", json={"message": "Hello"})
        assert response.json()["kind"] == "info"

    def test_rejects_empty_message(self, client):
        response = client.post("/api/v1/notifications", json={"message": ""})
        assert response.status_code == 422

    def test_dismiss_twice(self, client):
        notification_id = client.post(
            "/api/v1/notifications", json={"message": "Bye"}
        ).json()["id"]

        first = client.delete(f"/api/v1/notifications/{notification_id}")
        second = client.delete(f"/api/v1/notifications/{notification_id}")

        assert first.json()["message"] == "Notification dismissed"
        assert second.json()["message"] == "Notification already gone"
        assert client.get("/api/v1/notifications").json() == []
