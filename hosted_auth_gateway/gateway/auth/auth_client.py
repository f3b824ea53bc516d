import logging
from typing import Any, Optional, Protocol

import httpx

from hosted_auth_gateway.gateway.auth.models.auth_result import (
    AuthErrorDetail,
    AuthFailure,
    AuthResult,
    AuthSuccess,
)
from hosted_auth_gateway.gateway.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["AUTH"])


class AuthClient(Protocol):
    """Capability to verify or create credentials at the identity provider."""

    async def sign_in(
        self, *, email: Optional[str], password: Optional[str]
    ) -> AuthResult: ...

    async def sign_up(
        self,
        *,
        email: Optional[str],
        password: Optional[str],
        email_redirect_to: str,
    ) -> AuthResult: ...


class GoTrueAuthClient:
    """
    AuthClient speaking the GoTrue REST API (the auth server behind Supabase).

    Every outcome is returned as an AuthResult: a non-2xx answer or a transport
    error becomes AuthFailure and nothing is raised to the caller.
    """

    _sign_in_path: str = "/auth/v1/token"
    _sign_up_path: str = "/auth/v1/signup"

    def __init__(self, *, http_client: httpx.AsyncClient) -> None:
        if http_client is None:
            raise ValueError("http_client must not be None")
        if not isinstance(http_client, httpx.AsyncClient):
            raise TypeError("http_client must be an instance of httpx.AsyncClient")
        self._http_client = http_client

    async def sign_in(
        self, *, email: Optional[str], password: Optional[str]
    ) -> AuthResult:
        return await self._post(
            operation="sign in",
            path=self._sign_in_path,
            params={"grant_type": "password"},
            payload={"email": email, "password": password},
        )

    async def sign_up(
        self,
        *,
        email: Optional[str],
        password: Optional[str],
        email_redirect_to: str,
    ) -> AuthResult:
        return await self._post(
            operation="sign up",
            path=self._sign_up_path,
            params={"redirect_to": email_redirect_to},
            payload={"email": email, "password": password},
        )

    async def _post(
        self,
        *,
        operation: str,
        path: str,
        params: dict[str, str],
        payload: dict[str, Optional[str]],
    ) -> AuthResult:
        try:
            response = await self._http_client.post(path, params=params, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Identity provider rejected %s with HTTP status %s",
                operation,
                exc.response.status_code,
            )
            return AuthFailure(error=self.read_error_detail(exc.response))
        except httpx.HTTPError as exc:
            logger.warning(
                "Identity provider %s request could not be completed (%s)",
                operation,
                type(exc).__name__,
            )
            return AuthFailure(
                error=AuthErrorDetail(status_code=None, code=type(exc).__name__)
            )

        logger.debug("Identity provider accepted %s", operation)
        return AuthSuccess()

    @staticmethod
    def read_error_detail(response: httpx.Response) -> AuthErrorDetail:
        """Pull whatever error fields the provider sent; the body may not be JSON."""
        body: Any
        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            return AuthErrorDetail(status_code=response.status_code)

        code = body.get("error_code") or body.get("error")
        message = (
            body.get("msg") or body.get("message") or body.get("error_description")
        )
        return AuthErrorDetail(
            status_code=response.status_code,
            code=str(code) if code is not None else None,
            message=str(message) if message is not None else None,
        )
