from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from autohaus.domain.staff import StaffUser


class TestListStaff:
    def test_lists_accounts_oldest_first(
        self, admin_client: TestClient, staff_member: StaffUser
    ) -> None:
        response = admin_client.get("/admin/staff")

        assert response.status_code == 200
        assert [user["email"] for user in response.json()] == [
            "admin@autohaus.example",
            "sales@autohaus.example",
        ]
        assert all("password_hash" not in user for user in response.json())

    def test_requires_session(self, client: TestClient) -> None:
        response = client.get("/admin/staff")

        assert response.status_code == 401

    def test_requires_admin(self, staff_client: TestClient) -> None:
        response = staff_client.get("/admin/staff")

        assert response.status_code == 403
        assert response.json() == {
            "detail": "Administrator access required",
            "code": "FORBIDDEN",
        }


class TestCreateStaff:
    def test_creates_account(self, admin_client: TestClient) -> None:
        response = admin_client.post(
            "/admin/staff",
            json={
                "name": " New Hire ",
                "email": "New.Hire@Autohaus.example",
                "password": "long-enough",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "New Hire"
        assert body["email"] == "new.hire@autohaus.example"
        assert body["is_admin"] is False

    def test_new_account_can_sign_in(self, admin_client: TestClient, app: FastAPI) -> None:
        admin_client.post(
            "/admin/staff",
            json={"name": "New Hire", "email": "hire@autohaus.example", "password": "long-enough"},
        )

        other = TestClient(app, raise_server_exceptions=False)
        response = other.post(
            "/login", json={"email": "hire@autohaus.example", "password": "long-enough"}
        )

        assert response.status_code == 200

    def test_duplicate_email_conflicts(self, admin_client: TestClient) -> None:
        response = admin_client.post(
            "/admin/staff",
            json={"name": "Copy", "email": "ADMIN@autohaus.example", "password": "long-enough"},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "CONFLICT"

    def test_short_password_is_rejected(self, admin_client: TestClient) -> None:
        response = admin_client.post(
            "/admin/staff",
            json={"name": "New Hire", "email": "hire@autohaus.example", "password": "short"},
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "password"

    def test_non_admin_cannot_create(self, staff_client: TestClient) -> None:
        response = staff_client.post(
            "/admin/staff",
            json={"name": "New Hire", "email": "hire@autohaus.example", "password": "long-enough"},
        )

        assert response.status_code == 403


class TestDeleteStaff:
    def test_deletes_account(self, admin_client: TestClient, staff_member: StaffUser) -> None:
        response = admin_client.delete(f"/admin/staff/{staff_member.id}")

        assert response.status_code == 204
        emails = [user["email"] for user in admin_client.get("/admin/staff").json()]
        assert emails == ["admin@autohaus.example"]

    def test_cannot_delete_own_account(self, admin_client: TestClient, admin: StaffUser) -> None:
        response = admin_client.delete(f"/admin/staff/{admin.id}")

        assert response.status_code == 409
        assert response.json()["detail"] == "You cannot delete your own account"

    def test_unknown_account(self, admin_client: TestClient) -> None:
        response = admin_client.delete("/admin/staff/2b1e4a52-0c5e-4d43-9d7e-0f0c1c2d3e4f")

        assert response.status_code == 404

    def test_malformed_id_is_not_found(self, admin_client: TestClient) -> None:
        response = admin_client.delete("/admin/staff/not-an-id")

        assert response.status_code == 404
