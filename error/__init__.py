from typing import Dict, Optional


class ServerError(Exception):
    """Base class for server-related errors"""

    def __init__(self, msg="Server error occurred", status_code=500):
        self.msg = msg
        self.status_code = status_code
        super().__init__(self.msg)


class InvalidRequestError(ServerError):
    """Raised when request is invalid"""

    def __init__(self, msg="Invalid request", status_code=400):
        super().__init__(msg=msg, status_code=status_code)


class ResourceNotFoundError(ServerError):
    """Raised when requested resource is not found"""

    def __init__(self, msg="Resource not found", status_code=404):
        super().__init__(msg=msg, status_code=status_code)


class ContactValidationError(InvalidRequestError):
    """Raised when a contact form field fails its format check"""

    def __init__(
        self,
        msg="Contact form is invalid",
        status_code=422,
        errors: Optional[Dict[str, str]] = None,
    ):
        self.errors = errors or {}
        super().__init__(msg=msg, status_code=status_code)


class VerificationMissingError(InvalidRequestError):
    """Raised when no bot-check token is present at submit time"""

    def __init__(self, msg="Verification challenge not completed", status_code=400):
        super().__init__(msg=msg, status_code=status_code)


class DeliveryFailureError(ServerError):
    """Raised when the email delivery service rejects or fails a send"""

    def __init__(self, msg="Message delivery failed", status_code=502):
        super().__init__(msg=msg, status_code=status_code)
