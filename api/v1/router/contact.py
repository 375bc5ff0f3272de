from fastapi import APIRouter, Depends
from controller.contact import ContactOp
from schema.contact import (
    ContactStateOut,
    FieldUpdateIn,
    SubmitIn,
    SubmitOut,
    VerificationIn,
)
from service.session import get_contact_workflow

contact_router = APIRouter(tags=["contact"])


@contact_router.get("/contact", response_model=ContactStateOut)
def get_contact_form(workflow: ContactOp = Depends(get_contact_workflow)):
    """Current field values and submit status for this visitor"""
    return workflow.snapshot()


@contact_router.put("/contact/fields/{field_name}", response_model=ContactStateOut)
def update_contact_field(
    field_name: str,
    data: FieldUpdateIn,
    workflow: ContactOp = Depends(get_contact_workflow),
):
    """
    Set one of name, email or message
    - No validation happens until submit
    """
    workflow.update_field(field_name, data.value)
    return workflow.snapshot()


@contact_router.post("/contact/verification", response_model=ContactStateOut)
def record_verification(
    data: VerificationIn,
    workflow: ContactOp = Depends(get_contact_workflow),
):
    """Store the token issued by the reCAPTCHA widget callback"""
    workflow.captcha.receive(data.token)
    return workflow.snapshot()


@contact_router.delete("/contact/verification", response_model=ContactStateOut)
def reset_verification(workflow: ContactOp = Depends(get_contact_workflow)):
    """Forget the token, e.g. when the widget reports it expired"""
    workflow.captcha.reset()
    return workflow.snapshot()


@contact_router.post("/contact/submit", response_model=SubmitOut)
async def submit_contact_form(
    data: SubmitIn,
    workflow: ContactOp = Depends(get_contact_workflow),
):
    """
    Submit the contact form
    - Validates fields and requires a reCAPTCHA token
    - Sends the message through EmailJS
    - Returns the outcome with the toasts to display
    """
    if data.token is not None and not workflow.is_pending:
        workflow.captcha.receive(data.token)
    outcome = await workflow.submit()
    return SubmitOut(
        outcome=outcome,
        notifications=workflow.notifier.drain(),
        form=workflow.snapshot(),
    )
