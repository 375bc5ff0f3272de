import re
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError
from typing import Dict, List, Optional
from util.enum import SubmissionStatus, FailureReason, NotificationLevel

NAME_PATTERN = re.compile(r"[A-Za-zÀ-ÖØ-öø-ÿ\s]{2,}")
EMAIL_PATTERN = re.compile(r"[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}")
MESSAGE_MIN_LENGTH = 10
MESSAGE_MAX_LENGTH = 1000


class ContactFormState(BaseModel):
    """Field values as typed by the visitor; no checks on assignment."""

    name: str = ""
    email: str = ""
    message: str = ""


class ContactFormIn(BaseModel):
    """Submit-time view of the form, rejecting anything the inputs would."""

    name: str
    email: str
    message: str

    @field_validator("name")
    def validate_name(cls, value: str) -> str:
        if not value.strip() or not NAME_PATTERN.fullmatch(value):
            raise PydanticCustomError(
                "invalid_name",
                "Por favor, insira um nome válido (apenas letras e espaços)",
            )
        return value

    @field_validator("email")
    def validate_email(cls, value: str) -> str:
        if not EMAIL_PATTERN.fullmatch(value):
            raise PydanticCustomError(
                "invalid_email", "Por favor, insira um email válido"
            )
        return value

    @field_validator("message")
    def validate_message(cls, value: str) -> str:
        if not MESSAGE_MIN_LENGTH <= len(value) <= MESSAGE_MAX_LENGTH:
            raise PydanticCustomError(
                "invalid_message",
                "A mensagem deve ter entre {min} e {max} caracteres",
                {"min": MESSAGE_MIN_LENGTH, "max": MESSAGE_MAX_LENGTH},
            )
        return value


class DeliveryPayload(BaseModel):
    """Template parameters expected by the EmailJS contact template"""

    model_config = ConfigDict(populate_by_name=True)

    from_name: str
    from_email: str
    message: str
    to_email: str
    recaptcha_response: str = Field(alias="g-recaptcha-response")


class DeliveryResponse(BaseModel):
    status: int
    text: str = ""


class SubmissionOutcome(BaseModel):
    status: SubmissionStatus
    reason: Optional[FailureReason] = None
    errors: Dict[str, str] = {}


class Notification(BaseModel):
    level: NotificationLevel
    message: str


class FieldUpdateIn(BaseModel):
    value: str


class VerificationIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str = Field(alias="g-recaptcha-response")


class SubmitIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: Optional[str] = Field(default=None, alias="g-recaptcha-response")


class ContactStateOut(BaseModel):
    name: str
    email: str
    message: str
    status: SubmissionStatus
    verified: bool
    errors: Dict[str, str] = {}


class SubmitOut(BaseModel):
    outcome: SubmissionOutcome
    notifications: List[Notification]
    form: ContactStateOut
