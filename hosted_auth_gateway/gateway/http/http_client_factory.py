import logging
from typing import Mapping, Optional

import httpx

from hosted_auth_gateway.gateway.utilities.logger.log_levels import SRC_LOG_LEVELS
from hosted_auth_gateway.gateway.utilities.logger.logging_transport import (
    LoggingTransport,
)

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["HTTP"])


class HttpClientFactory:
    """Creates the httpx clients used to call external services."""

    def __init__(self, *, trace_requests: bool = True) -> None:
        self._trace_requests = trace_requests

    def create_http_client(
        self,
        *,
        base_url: str,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> httpx.AsyncClient:
        """
        Build a new client for a single unit of work.

        The caller owns the client and is expected to close it, normally with
        ``async with``.  ``timeout=None`` disables httpx timeouts entirely.
        """
        transport: httpx.AsyncBaseTransport = httpx.AsyncHTTPTransport()
        if self._trace_requests:
            transport = LoggingTransport(transport)
        logger.debug("Creating http client for %s", base_url)
        return httpx.AsyncClient(
            base_url=base_url,
            headers=dict(headers) if headers else None,
            timeout=timeout,
            transport=transport,
        )
