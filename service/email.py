import httpx
import logging
from typing import Optional

from config.setting import settings
from core.setup import http_client
from schema.contact import DeliveryPayload, DeliveryResponse
from util.error import handle_delivery_error

logger = logging.getLogger(__name__)


class EmailJSService:
    """Client for the EmailJS REST send endpoint.

    Non-200 answers are returned to the caller as-is; only transport
    failures raise.
    """

    def __init__(
        self,
        api_url: str = settings.EMAILJS_API_URL,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_url = api_url
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client or http_client.get_client

    async def send(
        self,
        service_id: str,
        template_id: str,
        payload: DeliveryPayload,
        auth_key: str,
    ) -> DeliveryResponse:
        body = {
            "service_id": service_id,
            "template_id": template_id,
            "user_id": auth_key,
            "template_params": payload.model_dump(by_alias=True),
        }
        with handle_delivery_error(f"sending email via {service_id}"):
            response = await self.client.post(self.api_url, json=body)

        logger.info(
            f"EmailJS answered {response.status_code} for template {template_id}"
        )
        return DeliveryResponse(status=response.status_code, text=response.text)
