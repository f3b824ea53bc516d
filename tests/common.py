from typing import Any

from fastapi import FastAPI

from hosted_auth_gateway.gateway.api import create_app
from hosted_auth_gateway.gateway.api_container import get_auth_gateway_config
from hosted_auth_gateway.gateway.utilities.auth_gateway_config import (
    AuthGatewayConfig,
)

TEST_AUTH_PROVIDER_URL: str = "https://identity.example.test"
TEST_AUTH_PROVIDER_API_KEY: str = "test-anon-key"
SIGN_IN_URL: str = f"{TEST_AUTH_PROVIDER_URL}/auth/v1/token"
SIGN_UP_URL: str = f"{TEST_AUTH_PROVIDER_URL}/auth/v1/signup"


def create_test_config(**overrides: Any) -> AuthGatewayConfig:
    values: dict[str, Any] = {
        "auth_provider_url": TEST_AUTH_PROVIDER_URL,
        "auth_provider_api_key": TEST_AUTH_PROVIDER_API_KEY,
    }
    values.update(overrides)
    return AuthGatewayConfig(**values)


def create_test_app(config: AuthGatewayConfig | None = None) -> FastAPI:
    test_config = config or create_test_config()
    app = create_app()
    app.dependency_overrides[get_auth_gateway_config] = lambda: test_config
    return app
