import uuid
from fastapi import Depends, Request

from controller.contact import ContactOp, contact_sessions

SESSION_KEY = "contact_sid"


def get_session_id(request: Request) -> str:
    """Return the visitor's session id, assigning one on first visit"""
    session_id = request.session.get(SESSION_KEY)
    if not session_id:
        session_id = uuid.uuid4().hex
        request.session[SESSION_KEY] = session_id
    return session_id


def get_contact_workflow(session_id: str = Depends(get_session_id)) -> ContactOp:
    return contact_sessions.get(session_id)
