"""Client for the Expo push notification endpoint."""

from __future__ import annotations

import logging

import httpx

from dogsitter.domain.entities import PushMessage

logger = logging.getLogger(__name__)


class ExpoPushClient:
    """Send one push message per call to the Expo push API.

    The response body is not inspected; any transport error or non-2xx
    status raises an ``httpx.HTTPError``.
    """

    def __init__(
        self,
        url: str,
        *,
        access_token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._access_token = access_token
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"
        return headers

    async def send(self, message: PushMessage) -> None:
        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport
        ) as client:
            response = await client.post(
                self._url, json=message.to_payload(), headers=self._headers()
            )
        response.raise_for_status()
        logger.debug("Push accepted by %s with status %s", self._url, response.status_code)


__all__ = ["ExpoPushClient"]
