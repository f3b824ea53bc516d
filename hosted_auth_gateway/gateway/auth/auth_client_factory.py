import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from hosted_auth_gateway.gateway.auth.auth_client import AuthClient, GoTrueAuthClient
from hosted_auth_gateway.gateway.auth.exceptions.auth_provider_not_configured_exception import (
    AuthProviderNotConfiguredException,
)
from hosted_auth_gateway.gateway.http.http_client_factory import HttpClientFactory
from hosted_auth_gateway.gateway.utilities.auth_gateway_config import (
    AuthGatewayConfig,
)
from hosted_auth_gateway.gateway.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["AUTH"])


class AuthClientFactory:
    """Hands out a fresh AuthClient for each request and closes it afterwards."""

    def __init__(
        self,
        *,
        http_client_factory: HttpClientFactory,
        config: AuthGatewayConfig,
    ) -> None:
        self._http_client_factory = http_client_factory
        if self._http_client_factory is None:
            raise ValueError("http_client_factory must not be None")
        if not isinstance(self._http_client_factory, HttpClientFactory):
            raise TypeError(
                "http_client_factory must be an instance of HttpClientFactory"
            )
        self._config = config
        if self._config is None:
            raise ValueError("config must not be None")
        if not isinstance(self._config, AuthGatewayConfig):
            raise TypeError("config must be an instance of AuthGatewayConfig")

    @asynccontextmanager
    async def create_auth_client(self) -> AsyncIterator[AuthClient]:
        base_url = self._config.auth_provider_url
        api_key = self._config.auth_provider_api_key

        if base_url is None:
            logger.error("AUTH_PROVIDER_URL is not set")
            raise AuthProviderNotConfiguredException(
                message="AUTH_PROVIDER_URL not set", setting="AUTH_PROVIDER_URL"
            )
        if api_key is None:
            logger.error("AUTH_PROVIDER_API_KEY is not set")
            raise AuthProviderNotConfiguredException(
                message="AUTH_PROVIDER_API_KEY not set",
                setting="AUTH_PROVIDER_API_KEY",
            )

        headers = {
            "accept": "application/json",
            "content-type": "application/json",
            "apikey": api_key,
            "authorization": f"Bearer {api_key}",
        }

        async with self._http_client_factory.create_http_client(
            base_url=base_url,
            headers=headers,
            timeout=self._config.auth_provider_timeout_seconds,
        ) as http_client:
            yield GoTrueAuthClient(http_client=http_client)
