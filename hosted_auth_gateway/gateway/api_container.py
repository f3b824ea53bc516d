from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from hosted_auth_gateway.gateway.auth.auth_client_factory import AuthClientFactory
from hosted_auth_gateway.gateway.http.http_client_factory import HttpClientFactory
from hosted_auth_gateway.gateway.managers.auth_form_manager import AuthFormManager
from hosted_auth_gateway.gateway.utilities.auth_gateway_config import (
    AuthGatewayConfig,
)


@lru_cache(maxsize=1)
def get_auth_gateway_config() -> AuthGatewayConfig:
    return AuthGatewayConfig()


@lru_cache(maxsize=1)
def get_http_client_factory() -> HttpClientFactory:
    return HttpClientFactory()


def get_auth_client_factory(
    http_client_factory: Annotated[
        HttpClientFactory, Depends(get_http_client_factory)
    ],
    config: Annotated[AuthGatewayConfig, Depends(get_auth_gateway_config)],
) -> AuthClientFactory:
    return AuthClientFactory(http_client_factory=http_client_factory, config=config)


def get_auth_form_manager(
    auth_client_factory: Annotated[
        AuthClientFactory, Depends(get_auth_client_factory)
    ],
    config: Annotated[AuthGatewayConfig, Depends(get_auth_gateway_config)],
) -> AuthFormManager:
    return AuthFormManager(auth_client_factory=auth_client_factory, config=config)
