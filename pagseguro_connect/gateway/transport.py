import logging
from typing import Dict, NamedTuple, Optional, Protocol

import httpx

from ..settings import settings
from ..utils.http import client, retry_policy

logger = logging.getLogger(__name__)


class GatewayResponse(NamedTuple):
    status_code: int
    body: str


class Transport(Protocol):
    async def post(
        self,
        url: str,
        body: str,
        *,
        headers: Dict[str, str],
        params: Dict[str, str],
    ) -> GatewayResponse:
        ...


class HttpxTransport:
    """
    Default transport: one httpx.AsyncClient per request, TLS verified.
    Status codes are handed back untouched; only connection-level failures
    (httpx.HTTPError) are retried, PAGSEGURO_TRANSPORT_RETRY_MAX times at most.
    """

    def __init__(
        self,
        timeout_sec: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout_sec = timeout_sec or settings.PAGSEGURO_TIMEOUT_SEC
        self._transport = transport

    @retry_policy(max_attempts=max(1, settings.PAGSEGURO_TRANSPORT_RETRY_MAX))
    async def post(
        self,
        url: str,
        body: str,
        *,
        headers: Dict[str, str],
        params: Dict[str, str],
    ) -> GatewayResponse:
        async with client(self.timeout_sec, transport=self._transport) as c:
            resp = await c.post(url, content=body.encode("utf-8"), headers=headers, params=params)
        logger.debug("POST %s -> %s", url, resp.status_code)
        return GatewayResponse(resp.status_code, resp.text)
