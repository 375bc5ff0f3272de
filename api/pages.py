from typing import Optional
from fastapi import APIRouter, Depends, Form, responses
from controller.contact import ContactOp
from controller.view import PortfolioView
from service.session import get_contact_workflow

pages_router = APIRouter(tags=["pages"])


@pages_router.get("/", response_class=responses.HTMLResponse)
def show_page(
    tab: Optional[str] = None,
    workflow: ContactOp = Depends(get_contact_workflow),
):
    """Render the portfolio with the selected tab visible"""
    return PortfolioView.render_page(tab, workflow)


@pages_router.post("/contact", response_class=responses.RedirectResponse)
async def post_contact_form(
    name: str = Form(""),
    email: str = Form(""),
    message: str = Form(""),
    token: str = Form("", alias="g-recaptcha-response"),
    workflow: ContactOp = Depends(get_contact_workflow),
):
    """
    Plain HTML form submission
    - Copies the posted fields into the visitor's form
    - Submits, then redirects back to the contact tab
    """
    if not workflow.is_pending:
        workflow.update_field("name", name)
        workflow.update_field("email", email)
        # Browsers post textarea line breaks as CRLF but count them as one
        workflow.update_field("message", message.replace("\r\n", "\n"))
        workflow.captcha.receive(token)
    await workflow.submit()
    return responses.RedirectResponse("/?tab=contact", status_code=303)
