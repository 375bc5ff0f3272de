import logging

logger = logging.getLogger(__name__)


class RecaptchaWidget:
    """
    Server-side mirror of one visitor's reCAPTCHA checkbox.
    Holds the latest token posted by the widget until it is reset.
    """

    def __init__(self, token: str = ""):
        self._token = token or ""

    def receive(self, token: str) -> None:
        """Record the value of the widget's g-recaptcha-response field"""
        self._token = (token or "").strip()

    def get_token(self) -> str:
        return self._token

    def reset(self) -> None:
        if self._token:
            logger.debug("Verification token discarded")
        self._token = ""
