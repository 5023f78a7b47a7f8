import asyncio
from typing import Any, Dict, Optional, Tuple, Type

import aiohttp

from config.settings import settings
from governance.errors import SmartWalletError
from utils.formatter_utils import mask_secret
from utils.logger_utils import get_logger

logger = get_logger("Smart Wallet Client")


class SmartWalletClient(object):
    """
    Base client for the Smart Wallet API.

    Owns one persistent aiohttp ClientSession, or uses one passed in by the caller.
    The bearer credential is attached to every request, never to the session.
    Performs exactly one HTTP call per operation: no retries, no backoff.
    Subclasses set error_class to the error raised for their operation.
    """

    error_class: Type[SmartWalletError] = SmartWalletError

    def __init__(
            self,
            api_key: Optional[str] = None,
            base_url: Optional[str] = None,
            timeout: Optional[int] = None,
            session: Optional[aiohttp.ClientSession] = None
    ):
        self.base_url = (base_url or settings.smart_wallet.api_url).rstrip("/")
        self._api_key = api_key if api_key is not None else settings.smart_wallet.api_key
        self.timeout = aiohttp.ClientTimeout(total=timeout or settings.smart_wallet.timeout)
        self._session = session
        self._owns_session = session is None
        logger.debug(f"Smart Wallet API at {self.base_url} (api key {mask_secret(self._api_key)})")

    @property
    def headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": f"{settings.app.name}/1.0",
            "Content-Type": "application/json",
        }
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def __aenter__(self):
        """Context manager entry"""
        await self._get_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Lazy loads or returns the existing session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
        return self._session

    async def close(self):
        """Closes the underlying session if this client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def _post(self, endpoint: str, payload: Dict[str, Any]) -> Tuple[int, str]:
        """
        Sends one POST request and returns (status, raw body text).

        Raises:
            error_class: If the service cannot be reached (status=None) or
                answers with a non-2xx status (status and body verbatim).
        """
        url = self._url(endpoint)
        session = await self._get_session()

        try:
            async with session.post(url, json=payload, headers=self.headers) as response:
                status = response.status
                body = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Could not reach Smart Wallet API at {url}: {e!r}")
            raise self.error_class(f"Smart Wallet API unreachable at {url}", status=None, body=str(e)) from e

        if not 200 <= status < 300:
            logger.error(f"Smart Wallet API rejected POST {endpoint}. Status: {status}, Body: {body}")
            raise self.error_class(f"Smart Wallet API rejected POST {endpoint}", status=status, body=body)

        return status, body
