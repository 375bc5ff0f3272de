import httpx
from typing import Optional
from config.setting import settings


class ClientSetup:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ClientSetup, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self) -> None:
        """Construct an HTTP client holder for outbound API calls"""
        self._client: Optional[httpx.AsyncClient] = None
        # None disables httpx's default timeout
        self._timeout = httpx.Timeout(settings.DELIVERY_TIMEOUT_SECONDS)

    @property
    def get_client(self) -> httpx.AsyncClient:
        """Grant client

            This method returns the shared
            async HTTP client, opening it on first use
        Returns:
            httpx.AsyncClient: http client
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def close(self) -> None:
        """Close the shared client if it was opened"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None


http_client = ClientSetup()
