"""HTML bodies for lead notification e-mails.

Rendered with Jinja2 and autoescaping on: every value comes from a public
form and must not inject markup into staff inboxes.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined

from autohaus.domain.financing import FinancingApplication, Party, mask_ssn
from autohaus.domain.leads import ContactRequest, QuickMessage

Section = tuple[str | None, list[tuple[str, Any]]]

_TEMPLATE = """\
<div style="font-family: Arial, sans-serif; max-width: 700px; margin: 0 auto; padding: 20px;">
  <h2 style="border-bottom: 2px solid #c00; padding-bottom: 8px;">{{ title }}</h2>
  {% if intro %}<p>{{ intro }}</p>{% endif %}
  {% for heading, items in sections %}
  {% if heading %}<h3>{{ heading }}</h3>{% endif %}
  <table style="width: 100%; border-collapse: collapse;">
    {% for label, value in items %}
    <tr>
      <td style="padding: 4px 8px; font-weight: bold; width: 40%;">{{ label }}</td>
      <td style="padding: 4px 8px;">{{ value if value not in (None, "") else "N/A" }}</td>
    </tr>
    {% endfor %}
  </table>
  {% endfor %}
  {% if message %}
  <h3>Message</h3>
  <p style="white-space: pre-wrap;">{{ message }}</p>
  {% endif %}
  <p style="color: #888; font-size: 12px; margin-top: 24px;">Sent automatically by the dealership website.</p>
</div>
"""

_environment = Environment(
    loader=DictLoader({"email.html": _TEMPLATE}),
    autoescape=True,
    undefined=StrictUndefined,
)


def _render(
    title: str,
    sections: list[Section],
    message: str | None = None,
    intro: str | None = None,
) -> str:
    return _environment.get_template("email.html").render(
        title=title,
        sections=sections,
        message=message,
        intro=intro,
    )


def _currency(value: Decimal | None) -> str | None:
    if value is None:
        return None
    return f"${value:,.2f}"


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def render_contact_notification(contact: ContactRequest) -> str:
    title = contact.subject + (" (HIGH PRIORITY)" if contact.is_test_drive else "")
    items: list[tuple[str, Any]] = [
        ("Name", contact.full_name),
        ("Email", contact.email),
        ("Phone", contact.phone),
        ("Preferred contact", contact.preferred_contact),
        ("Request type", contact.contact_type.value),
        ("Vehicle", contact.vehicle_info),
    ]
    if contact.is_test_drive:
        items += [
            ("Preferred date", contact.preferred_date),
            ("Preferred time", contact.preferred_time),
            ("Driver's license", contact.drivers_license),
        ]
    items.append(("Marketing consent", _yes_no(contact.communication_consent)))
    return _render(title, [(None, items)], message=contact.message)


def render_contact_confirmation(contact: ContactRequest) -> str:
    what = "test drive request" if contact.is_test_drive else "message"
    return _render(
        f"Thank you, {contact.first_name}!",
        [],
        message=contact.message,
        intro=f"We received your {what} and a member of our team will get back to you shortly.",
    )


def render_quick_message(message: QuickMessage) -> str:
    items = [("Name", message.name), ("Email", message.email), ("Phone", message.phone)]
    return _render(f"New message from {message.name}", [(None, items)], message=message.message)


def _party_items(party: Party) -> list[tuple[str, Any]]:
    residence = party.residence
    employment = party.employment
    address = residence.address1 + (f", {residence.address2}" if residence.address2 else "")
    return [
        ("Name", party.full_name),
        ("Email", party.email),
        ("Mobile phone", party.mobile_phone),
        ("Home phone", party.home_phone),
        ("SSN", mask_ssn(party.ssn)),
        ("Date of birth", party.date_of_birth.strftime("%B %d, %Y")),
        (
            "Driver's license",
            f"{party.driver_license_number} ({party.driver_license_state}, exp. {party.driver_license_exp})",
        ),
        ("Address", address),
        ("City / State / ZIP", f"{residence.city}, {residence.state} {residence.zip_code}"),
        ("Time at residence", f"{residence.years} years, {residence.months} months"),
        ("Residence type", residence.residence_type),
        ("Rent / mortgage", _currency(residence.rent_mortgage)),
        ("Employer", f"{employment.employer_name} ({employment.employer_type})"),
        ("Occupation", employment.occupation),
        ("Monthly income", _currency(employment.monthly_income)),
        ("Time on job", f"{employment.years} years, {employment.months} months"),
        ("Work phone", employment.work_phone),
    ]


def render_financing_notification(application: FinancingApplication) -> str:
    """Staff copy of an application. SSNs are masked to the last four digits."""
    vehicle = application.vehicle
    sections: list[Section] = [("Applicant", _party_items(application.applicant))]
    if application.co_buyer is not None:
        sections.append(("Co-Buyer", _party_items(application.co_buyer)))
    sections.append(
        (
            "Vehicle",
            [
                ("Vehicle", vehicle.summary),
                ("Trim", vehicle.trim),
                ("VIN", vehicle.vin),
                ("Stock number", vehicle.stock_number),
                ("Mileage", vehicle.mileage),
                ("Price", _currency(vehicle.price)),
                ("Down payment", _currency(vehicle.down_payment)),
            ],
        )
    )
    sections.append(
        ("Consents", [("Text messages", _yes_no(application.text_message_consent))])
    )
    return _render(
        f"New Financing Application #{application.reference_id}",
        sections,
        message=application.additional_comments,
    )
