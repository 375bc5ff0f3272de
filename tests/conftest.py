"""Root conftest — shared fixtures for the portfolio tests."""

import os

# Keep tests independent of any local .env
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from unittest.mock import AsyncMock

import pytest

from controller.contact import ContactOp
from schema.contact import DeliveryResponse
from service.captcha import RecaptchaWidget
from service.notification import NotificationCenter


VALID_FIELDS = {
    "name": "Maria Silva",
    "email": "maria@example.com",
    "message": "Olá, gostaria de conversar sobre um projeto.",
}


@pytest.fixture
def delivery():
    fake = AsyncMock()
    fake.send = AsyncMock(return_value=DeliveryResponse(status=200, text="OK"))
    return fake


@pytest.fixture
def captcha():
    return RecaptchaWidget()


@pytest.fixture
def notifier():
    return NotificationCenter()


@pytest.fixture
def workflow(delivery, captcha, notifier):
    return ContactOp(
        delivery=delivery,
        captcha=captcha,
        notifier=notifier,
        destination_email="owner@example.com",
        service_id="service_test",
        template_id="template_test",
        auth_key="public_test",
    )


@pytest.fixture
def filled_workflow(workflow):
    for field, value in VALID_FIELDS.items():
        workflow.update_field(field, value)
    return workflow
