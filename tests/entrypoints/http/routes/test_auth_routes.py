from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from autohaus.domain.staff import StaffUser

ADMIN_EMAIL = "admin@autohaus.example"
ADMIN_PASSWORD = "admin-password"


class TestLogin:
    def test_login_returns_account_and_sets_session(
        self, client: TestClient, admin: StaffUser
    ) -> None:
        response = client.post("/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})

        assert response.status_code == 200
        assert response.json() == {
            "id": admin.id,
            "name": "Site Admin",
            "email": ADMIN_EMAIL,
            "is_admin": True,
            "created_at": admin.created_at.isoformat(),
        }
        assert "session" in response.cookies

    def test_login_ignores_email_case(self, client: TestClient, admin: StaffUser) -> None:
        response = client.post(
            "/login", json={"email": "  Admin@AutoHaus.example ", "password": ADMIN_PASSWORD}
        )

        assert response.status_code == 200
        assert response.json()["id"] == admin.id

    def test_wrong_password(self, client: TestClient, admin: StaffUser) -> None:
        response = client.post("/login", json={"email": ADMIN_EMAIL, "password": "nope"})

        assert response.status_code == 401
        assert response.json() == {
            "detail": "Invalid email or password",
            "code": "UNAUTHORIZED",
        }

    def test_unknown_email_gets_the_same_answer(self, client: TestClient) -> None:
        response = client.post(
            "/login", json={"email": "ghost@autohaus.example", "password": ADMIN_PASSWORD}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_missing_password(self, client: TestClient) -> None:
        response = client.post("/login", json={"email": ADMIN_EMAIL})

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "password"


class TestSession:
    def test_me_returns_signed_in_account(self, admin_client: TestClient) -> None:
        response = admin_client.get("/me")

        assert response.status_code == 200
        assert response.json()["email"] == ADMIN_EMAIL

    def test_me_requires_session(self, client: TestClient) -> None:
        response = client.get("/me")

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"

    def test_logout_clears_session(self, admin_client: TestClient) -> None:
        response = admin_client.post("/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Signed out"}
        assert admin_client.get("/me").status_code == 401

    def test_session_of_deleted_account_is_rejected(
        self, app: FastAPI, admin_client: TestClient, staff_member: StaffUser
    ) -> None:
        sales = TestClient(app, raise_server_exceptions=False)
        sales.post("/login", json={"email": "sales@autohaus.example", "password": "sales-password"})
        assert sales.get("/me").status_code == 200

        admin_client.delete(f"/admin/staff/{staff_member.id}")

        assert sales.get("/me").status_code == 401
