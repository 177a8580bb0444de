from __future__ import annotations

from typing import Any
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from autohaus.infra.config import Settings

RECEIVER_EMAIL = "leads@autohaus.example"


def contact_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "firstName": "Ana",
        "lastName": "Silva",
        "email": "ana@example.com",
        "phone": "(555) 123-4567",
        "message": "Is the 2021 F-150 still available?",
        "dataConsent": True,
        "accuracyConsent": True,
    }
    payload.update(overrides)
    return payload


def financing_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "applicant": {
            "firstName": "Ana",
            "lastName": "Silva",
            "email": "Ana@Example.com",
            "mobilePhone": "(555) 123-4567",
            "ssn": "123-45-6789",
            "dateOfBirth": "1990-05-17",
            "driverLicenseNumber": "D1234567",
            "driverLicenseState": "TX",
            "driverLicenseExp": "08/29",
            "residence": {
                "address1": "100 Main Street",
                "city": "Dallas",
                "state": "TX",
                "zipCode": "75001",
                "years": 4,
                "months": 2,
                "residenceType": "Rent",
                "rentMortgage": "1500",
            },
            "employment": {
                "employerName": "Acme Corp",
                "employerType": "Employed",
                "monthlyIncome": "6500",
                "occupation": "Engineer",
                "address1": "200 Commerce Street",
                "city": "Dallas",
                "state": "TX",
                "zipCode": "75002",
                "years": 3,
                "months": 0,
            },
        },
        "vehicle": {
            "year": 2022,
            "make": "Ford",
            "model": "F-150",
            "vin": "1FTFW1E50MFA00001",
            "mileage": 12000,
        },
        "acknowledgmentConsent": True,
        "creditCheckConsent": True,
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def no_receiver(app: FastAPI, settings: Settings) -> None:
    app.state.settings = settings.model_copy(update={"CONTACT_RECEIVER_EMAIL": None})


# ============================================================================
# Contact form
# ============================================================================


class TestContactSubmit:
    def test_inquiry_notifies_dealership_and_confirms(
        self, client: TestClient, email_sender: Mock
    ) -> None:
        response = client.post("/contact/submit", json=contact_payload())

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Thank you! We will contact you shortly.",
        }
        notification, confirmation = [call.args[0] for call in email_sender.send.call_args_list]
        assert notification.to == RECEIVER_EMAIL
        assert notification.reply_to == "ana@example.com"
        assert notification.high_priority is False
        assert "Ana Silva" in notification.subject
        assert confirmation.to == "ana@example.com"

    def test_test_drive_is_high_priority(self, client: TestClient, email_sender: Mock) -> None:
        response = client.post(
            "/contact/submit",
            json=contact_payload(
                contactType="test-drive",
                driversLicense="D1234567",
                testDriveConsent=True,
                preferredDate="2026-11-02",
            ),
        )

        assert response.json()["message"] == (
            "Thank you! Your test drive request has been received. We will confirm shortly."
        )
        assert email_sender.send.call_args_list[0].args[0].high_priority is True

    def test_test_drive_needs_license_and_consent(
        self, client: TestClient, email_sender: Mock
    ) -> None:
        response = client.post("/contact/submit", json=contact_payload(contactType="test-drive"))

        assert response.status_code == 422
        fields = [error["field"] for error in response.json()["errors"]]
        assert fields == ["driversLicense", "testDriveConsent"]
        email_sender.send.assert_not_called()

    def test_consents_are_required(self, client: TestClient) -> None:
        response = client.post(
            "/contact/submit", json=contact_payload(dataConsent=False, accuracyConsent=False)
        )

        assert response.status_code == 422
        fields = [error["field"] for error in response.json()["errors"]]
        assert fields == ["dataConsent", "accuracyConsent"]

    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"phone": "555-123-4567"}, "phone"),
            ({"message": "Too short"}, "message"),
            ({"firstName": "A"}, "firstName"),
            ({"email": "not-an-email"}, "email"),
        ],
    )
    def test_format_errors(self, client: TestClient, overrides: dict, field: str) -> None:
        response = client.post("/contact/submit", json=contact_payload(**overrides))

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == field

    def test_failed_notification_returns_503(
        self, client: TestClient, email_sender: Mock
    ) -> None:
        email_sender.send.return_value = False

        response = client.post("/contact/submit", json=contact_payload())

        assert response.status_code == 503
        assert response.json()["code"] == "SERVICE_UNAVAILABLE"
        assert email_sender.send.call_count == 1

    def test_failed_confirmation_still_succeeds(
        self, client: TestClient, email_sender: Mock
    ) -> None:
        email_sender.send.side_effect = [True, False]

        response = client.post("/contact/submit", json=contact_payload())

        assert response.status_code == 200

    @pytest.mark.usefixtures("no_receiver")
    def test_missing_receiver_returns_503(self, client: TestClient, email_sender: Mock) -> None:
        response = client.post("/contact/submit", json=contact_payload())

        assert response.status_code == 503
        email_sender.send.assert_not_called()


class TestSendMessage:
    def test_sends_and_redirects(self, client: TestClient, email_sender: Mock) -> None:
        response = client.post(
            "/send-message",
            json={
                "name": "Ana",
                "email": "ana@example.com",
                "phone": "555 1234",
                "message": "Call me",
            },
        )

        assert response.status_code == 200
        assert response.json() == {"redirect": "/message-sent"}
        message = email_sender.send.call_args.args[0]
        assert message.to == RECEIVER_EMAIL
        assert message.subject == "New message from Ana"

    def test_delivery_failure(self, client: TestClient, email_sender: Mock) -> None:
        email_sender.send.return_value = False

        response = client.post(
            "/send-message",
            json={"name": "Ana", "email": "ana@example.com", "phone": "1", "message": "Hi"},
        )

        assert response.status_code == 503


# ============================================================================
# Financing
# ============================================================================


class TestFinancingSubmit:
    def test_stores_and_notifies(self, client: TestClient, email_sender: Mock) -> None:
        response = client.post("/financing-submit", json=financing_payload())

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert len(body["referenceId"]) == 8
        assert body["message"] == (
            f"Your application has been received. Reference ID: {body['referenceId']}"
        )
        message = email_sender.send.call_args.args[0]
        assert message.to == RECEIVER_EMAIL
        assert message.reply_to == "ana@example.com"
        assert message.subject == "New Financing Application - Ana Silva"
        assert "123-45-6789" not in message.html

    def test_second_application_within_a_day_conflicts(self, client: TestClient) -> None:
        first = client.post("/financing-submit", json=financing_payload())
        second = client.post("/financing-submit", json=financing_payload())

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()["code"] == "CONFLICT"

    def test_duplicate_check_ignores_email_case(self, client: TestClient) -> None:
        client.post("/financing-submit", json=financing_payload())
        payload = financing_payload()
        payload["applicant"]["email"] = "ANA@example.com"

        response = client.post("/financing-submit", json=payload)

        assert response.status_code == 409

    def test_cross_field_rules(self, client: TestClient) -> None:
        payload = financing_payload(acknowledgmentConsent=False)
        payload["applicant"]["dateOfBirth"] = "2020-01-01"

        response = client.post("/financing-submit", json=payload)

        assert response.status_code == 422
        fields = [error["field"] for error in response.json()["errors"]]
        assert fields == ["applicantDOB", "acknowledgmentConsent"]

    def test_nested_format_errors(self, client: TestClient) -> None:
        payload = financing_payload()
        payload["applicant"]["residence"]["zipCode"] = "7500"
        payload["vehicle"]["vin"] = "1FTFW1E50MFA0000O"

        response = client.post("/financing-submit", json=payload)

        assert response.status_code == 422
        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"applicant.residence.zipCode", "vehicle.vin"}

    def test_failed_notification_still_succeeds(
        self, client: TestClient, email_sender: Mock
    ) -> None:
        email_sender.send.return_value = False

        response = client.post("/financing-submit", json=financing_payload())

        assert response.status_code == 201

    @pytest.mark.usefixtures("no_receiver")
    def test_missing_receiver_still_stores(self, client: TestClient, email_sender: Mock) -> None:
        response = client.post("/financing-submit", json=financing_payload())

        assert response.status_code == 201
        email_sender.send.assert_not_called()
