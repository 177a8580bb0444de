from fastapi import APIRouter, Depends

from autohaus.entrypoints.http.dependencies import (
    get_send_quick_message_use_case,
    get_submit_contact_request_use_case,
    get_submit_financing_application_use_case,
)
from autohaus.entrypoints.http.dtos.financing import (
    FinancingApplicationRequestDTO,
    FinancingSubmittedDTO,
)
from autohaus.entrypoints.http.dtos.leads import (
    ContactRequestDTO,
    ContactSubmittedDTO,
    QuickMessageRequestDTO,
    RedirectDTO,
)
from autohaus.entrypoints.http.error_responses import error_response
from autohaus.entrypoints.http.mappers.leads_mapper import ContactMapper, FinancingMapper
from autohaus.use_cases.submit_contact_request import SendQuickMessage, SubmitContactRequest
from autohaus.use_cases.submit_financing_application import SubmitFinancingApplication

router = APIRouter(tags=["Leads"])

DELIVERY_RESPONSE = {
    503: error_response("The dealership could not be notified"),
}


@router.post(
    "/contact/submit",
    response_model=ContactSubmittedDTO,
    summary="Submit the contact form",
    description="""
    General inquiries, test-drive bookings and messages.

    ## Requirements
    - Names 2-50 characters, phone as `(XXX) XXX-XXXX`, message 10-1000 characters
    - `dataConsent` and `accuracyConsent` must be true
    - Test drives (`contactType=test-drive`) also need `driversLicense` and
      `testDriveConsent`

    The dealership is notified (high priority for test drives, reply-to set
    to the customer) and the customer gets a best-effort confirmation.
    """,
    responses={
        422: error_response("Invalid or incomplete form"),
        **DELIVERY_RESPONSE,
    },
)
def submit_contact(
    payload: ContactRequestDTO,
    use_case: SubmitContactRequest = Depends(get_submit_contact_request_use_case),
) -> ContactSubmittedDTO:
    # 1. Map to domain request
    request = ContactMapper.to_domain(payload)

    # 2. Execute use case
    use_case.execute(request)

    # 3. Map to response
    if request.is_test_drive:
        message = "Thank you! Your test drive request has been received. We will confirm shortly."
    else:
        message = "Thank you! We will contact you shortly."
    return ContactSubmittedDTO(message=message)


@router.post(
    "/send-message",
    response_model=RedirectDTO,
    summary="Send a quick message",
    responses=DELIVERY_RESPONSE,
)
def send_message(
    payload: QuickMessageRequestDTO,
    use_case: SendQuickMessage = Depends(get_send_quick_message_use_case),
) -> RedirectDTO:
    use_case.execute(ContactMapper.to_quick_message(payload))
    return RedirectDTO(redirect="/message-sent")


@router.post(
    "/financing-submit",
    response_model=FinancingSubmittedDTO,
    status_code=201,
    summary="Submit a financing application",
    description="""
    Credit application for one vehicle with an optional co-buyer.

    ## Rules
    - Applicant and co-buyer must be at least 18
    - Vehicle model year between 2010 and next year; VIN is 17 characters
      without I, O or Q
    - Monthly income between 1,000 and 1,000,000
    - `acknowledgmentConsent` and `creditCheckConsent` must be true
    - One application per e-mail address every 24 hours (409 otherwise)

    The application is stored before the finance team is e-mailed; a failed
    e-mail does not fail the request.
    """,
    responses={
        409: error_response("Already applied in the last 24 hours"),
        422: error_response("Invalid application"),
    },
)
def submit_financing(
    payload: FinancingApplicationRequestDTO,
    use_case: SubmitFinancingApplication = Depends(get_submit_financing_application_use_case),
) -> FinancingSubmittedDTO:
    # 1. Map to domain request
    application = FinancingMapper.to_domain(payload)

    # 2. Execute use case
    saved = use_case.execute(application)

    # 3. Map to response
    return FinancingMapper.to_response(saved)
