import logging

import httpx

from hosted_auth_gateway.gateway.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["HTTP_TRACING"])

REDACTED_HEADERS: frozenset[str] = frozenset({"apikey", "authorization", "cookie"})


class LoggingTransport(httpx.AsyncBaseTransport):
    """
    Wraps another transport and traces each call to the identity provider.

    Request bodies carry credentials, so only the method, url and redacted
    headers are written out.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport) -> None:
        self.transport = transport

    @staticmethod
    def redact_headers(headers: httpx.Headers) -> dict[str, str]:
        return {
            key: "***" if key.lower() in REDACTED_HEADERS else value
            for key, value in headers.items()
        }

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f" ====== Request: {request.method} {request.url} =====")
            logger.debug(f"Headers: {self.redact_headers(request.headers)}")

        response = await self.transport.handle_async_request(request)

        logger.debug(
            f"====== Response: {request.method} {request.url} {response.status_code} ====="
        )
        return response

    async def aclose(self) -> None:
        await self.transport.aclose()
