import logging
from collections import OrderedDict
from typing import Dict, Optional
from pydantic import ValidationError

from config.setting import settings
from schema.contact import (
    ContactFormIn,
    ContactFormState,
    ContactStateOut,
    DeliveryPayload,
    SubmissionOutcome,
)
from service.captcha import RecaptchaWidget
from service.email import EmailJSService
from service.notification import NotificationCenter
from util.enum import FailureReason, FormField, SubmissionStatus
import error

logger = logging.getLogger(__name__)

VERIFICATION_MISSING_MESSAGE = "Por favor, complete o captcha"
SUCCESS_MESSAGE = "Mensagem enviada com sucesso!"
FAILURE_MESSAGE = "Erro ao enviar mensagem. Tente novamente."
ACCEPTED_STATUS = 200


class ContactOp:
    """
    Contact form workflow for a single visitor.

    Owns the form fields and the submit control status, and drives
    validation, the bot-check gate and the email delivery call.
    """

    def __init__(
        self,
        delivery: EmailJSService,
        captcha: RecaptchaWidget,
        notifier: NotificationCenter,
        destination_email: str = settings.CONTACT_DESTINATION_EMAIL,
        service_id: str = settings.EMAILJS_SERVICE_ID,
        template_id: str = settings.EMAILJS_TEMPLATE_ID,
        auth_key: str = settings.EMAILJS_PUBLIC_KEY,
    ):
        self.delivery = delivery
        self.captcha = captcha
        self.notifier = notifier
        self.destination_email = destination_email
        self.service_id = service_id
        self.template_id = template_id
        self.auth_key = auth_key

        self.form = ContactFormState()
        self.status = SubmissionStatus.idle
        self.errors: Dict[str, str] = {}

    @property
    def is_pending(self) -> bool:
        return self.status is SubmissionStatus.pending

    def update_field(self, field_name: str, value: str) -> ContactFormState:
        """Set one form field as typed, without validating it"""
        try:
            field = FormField(field_name)
        except ValueError:
            raise error.InvalidRequestError(
                f"Unknown contact field '{field_name}'")

        setattr(self.form, field.value, value)
        return self.form

    async def submit(self) -> SubmissionOutcome:
        """
        Run one submission attempt and report how it ended.

        Never raises: every failure ends the attempt with an outcome and,
        except for inline field errors, a toast.
        """
        if self.is_pending:
            logger.info("Contact submission already in flight, ignoring")
            return SubmissionOutcome(status=SubmissionStatus.pending)

        try:
            contact = self._validate()
            token = self._require_token()
        except error.ContactValidationError as e:
            self.errors = e.errors
            return SubmissionOutcome(
                status=SubmissionStatus.failed,
                reason=FailureReason.validation,
                errors=e.errors,
            )
        except error.VerificationMissingError:
            self.notifier.notify_failure(VERIFICATION_MISSING_MESSAGE)
            return SubmissionOutcome(
                status=SubmissionStatus.failed,
                reason=FailureReason.verification_missing,
            )

        self.status = SubmissionStatus.pending
        payload = DeliveryPayload(
            from_name=contact.name,
            from_email=contact.email,
            message=contact.message,
            to_email=self.destination_email,
            recaptcha_response=token,
        )

        try:
            await self._dispatch(payload)
        except Exception as e:
            self.status = SubmissionStatus.failed
            logger.error(f"Error sending email: {e}", exc_info=True)
            self.notifier.notify_failure(FAILURE_MESSAGE)
            return SubmissionOutcome(
                status=SubmissionStatus.failed,
                reason=FailureReason.delivery,
            )
        else:
            self.status = SubmissionStatus.succeeded
            self.form = ContactFormState()
            self.notifier.notify_success(SUCCESS_MESSAGE)
            logger.info(f"Contact message from {contact.email} delivered")
            return SubmissionOutcome(status=SubmissionStatus.succeeded)
        finally:
            # A token is good for one attempt only
            self.captcha.reset()
            # Cancelled while awaiting the delivery call
            if self.is_pending:
                self.status = SubmissionStatus.failed

    def snapshot(self) -> ContactStateOut:
        return ContactStateOut(
            name=self.form.name,
            email=self.form.email,
            message=self.form.message,
            status=self.status,
            verified=bool(self.captcha.get_token()),
            errors=self.errors,
        )

    def _validate(self) -> ContactFormIn:
        try:
            contact = ContactFormIn.model_validate(self.form.model_dump())
        except ValidationError as e:
            errors = {
                str(err["loc"][-1]): err["msg"] for err in e.errors()
            }
            raise error.ContactValidationError(errors=errors)

        self.errors = {}
        return contact

    def _require_token(self) -> str:
        token = self.captcha.get_token()
        if not token:
            raise error.VerificationMissingError()
        return token

    async def _dispatch(self, payload: DeliveryPayload) -> None:
        response = await self.delivery.send(
            self.service_id, self.template_id, payload, self.auth_key
        )
        if response.status != ACCEPTED_STATUS:
            raise error.DeliveryFailureError(
                f"EmailJS rejected message with status {response.status}: "
                f"{response.text}"
            )


class ContactSessions:
    """
    In-memory map from browser session id to that visitor's workflow.
    Oldest idle sessions are evicted once max_sessions is exceeded.
    """

    def __init__(
        self,
        delivery: Optional[EmailJSService] = None,
        max_sessions: int = settings.MAX_CONTACT_SESSIONS,
    ):
        self.delivery = delivery or EmailJSService()
        self.max_sessions = max_sessions
        self._workflows: "OrderedDict[str, ContactOp]" = OrderedDict()

    def get(self, session_id: str) -> ContactOp:
        workflow = self._workflows.get(session_id)
        if workflow is None:
            workflow = ContactOp(
                delivery=self.delivery,
                captcha=RecaptchaWidget(),
                notifier=NotificationCenter(),
            )
            self._workflows[session_id] = workflow
            self._evict(keep=session_id)
        else:
            self._workflows.move_to_end(session_id)
        return workflow

    def clear(self) -> None:
        self._workflows.clear()

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._workflows

    def __len__(self) -> int:
        return len(self._workflows)

    def _evict(self, keep: str) -> None:
        for session_id in list(self._workflows):
            if len(self._workflows) <= self.max_sessions:
                break
            if session_id != keep and not self._workflows[session_id].is_pending:
                del self._workflows[session_id]


contact_sessions = ContactSessions()
