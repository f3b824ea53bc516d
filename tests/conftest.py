from typing import AsyncGenerator, Generator

import httpx
import pytest

from hosted_auth_gateway.gateway.api_container import get_auth_gateway_config
from tests.common import create_test_app

AUTH_GATEWAY_ENVIRONMENT_VARIABLES: list[str] = [
    "SITE_URL",
    "AUTH_PROVIDER_URL",
    "AUTH_PROVIDER_API_KEY",
    "AUTH_PROVIDER_TIMEOUT_SECONDS",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    for name in AUTH_GATEWAY_ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    get_auth_gateway_config.cache_clear()
    yield
    get_auth_gateway_config.cache_clear()


@pytest.fixture
async def async_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=create_test_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
