import json

import httpx
import pytest
import respx

from hosted_auth_gateway.gateway.auth.auth_client import GoTrueAuthClient
from hosted_auth_gateway.gateway.auth.models.auth_result import (
    AuthErrorDetail,
    AuthFailure,
    AuthSuccess,
)
from tests.common import SIGN_IN_URL, SIGN_UP_URL, TEST_AUTH_PROVIDER_URL


@pytest.mark.asyncio
async def test_sign_in_success() -> None:
    with respx.mock(assert_all_called=True) as router:
        route = router.post(SIGN_IN_URL).respond(
            json={"access_token": "t", "refresh_token": "r"}, status_code=200
        )
        async with httpx.AsyncClient(base_url=TEST_AUTH_PROVIDER_URL) as http_client:
            result = await GoTrueAuthClient(http_client=http_client).sign_in(
                email="a@b.com", password="pw123"
            )

    assert result == AuthSuccess()
    request = route.calls.last.request
    assert request.url.params["grant_type"] == "password"
    assert json.loads(request.content) == {"email": "a@b.com", "password": "pw123"}


@pytest.mark.asyncio
async def test_sign_up_sends_redirect_to() -> None:
    with respx.mock(assert_all_called=True) as router:
        route = router.post(SIGN_UP_URL).respond(json={"id": "u1"}, status_code=200)
        async with httpx.AsyncClient(base_url=TEST_AUTH_PROVIDER_URL) as http_client:
            result = await GoTrueAuthClient(http_client=http_client).sign_up(
                email="a@b.com",
                password="pw123",
                email_redirect_to="http://localhost:3001/verify",
            )

    assert isinstance(result, AuthSuccess)
    assert route.calls.last.request.url.params["redirect_to"] == (
        "http://localhost:3001/verify"
    )


@pytest.mark.asyncio
async def test_provider_error_becomes_failure_with_detail() -> None:
    with respx.mock(assert_all_called=True) as router:
        router.post(SIGN_IN_URL).respond(
            json={
                "code": 400,
                "error_code": "invalid_credentials",
                "msg": "Invalid login credentials",
            },
            status_code=400,
        )
        async with httpx.AsyncClient(base_url=TEST_AUTH_PROVIDER_URL) as http_client:
            result = await GoTrueAuthClient(http_client=http_client).sign_in(
                email="a@b.com", password="wrong"
            )

    assert result == AuthFailure(
        error=AuthErrorDetail(
            status_code=400,
            code="invalid_credentials",
            message="Invalid login credentials",
        )
    )


@pytest.mark.asyncio
async def test_transport_error_becomes_failure_without_status() -> None:
    with respx.mock(assert_all_called=True) as router:
        router.post(SIGN_IN_URL).mock(side_effect=httpx.ConnectTimeout)
        async with httpx.AsyncClient(base_url=TEST_AUTH_PROVIDER_URL) as http_client:
            result = await GoTrueAuthClient(http_client=http_client).sign_in(
                email="a@b.com", password="pw123"
            )

    assert isinstance(result, AuthFailure)
    assert result.error.status_code is None
    assert result.error.code == "ConnectTimeout"


@pytest.mark.parametrize(
    "response,expected",
    [
        (
            httpx.Response(400, json={"error": "invalid_grant", "error_description": "bad"}),
            AuthErrorDetail(status_code=400, code="invalid_grant", message="bad"),
        ),
        (
            httpx.Response(429, json={"message": "slow down"}),
            AuthErrorDetail(status_code=429, message="slow down"),
        ),
        (
            httpx.Response(422, json={"code": 422, "msg": "Password too short"}),
            AuthErrorDetail(status_code=422, message="Password too short"),
        ),
        (
            httpx.Response(502, text="<html>bad gateway</html>"),
            AuthErrorDetail(status_code=502),
        ),
        (
            httpx.Response(500, json=["unexpected"]),
            AuthErrorDetail(status_code=500),
        ),
    ],
)
def test_read_error_detail(response: httpx.Response, expected: AuthErrorDetail) -> None:
    assert GoTrueAuthClient.read_error_detail(response) == expected


def test_constructor_requires_async_client() -> None:
    with pytest.raises(ValueError):
        GoTrueAuthClient(http_client=None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        GoTrueAuthClient(http_client=httpx.Client())  # type: ignore[arg-type]


def test_failure_carries_only_the_error_detail() -> None:
    failure = AuthFailure(error=AuthErrorDetail(status_code=400, code="bad"))

    assert failure.model_dump() == {
        "error": {"status_code": 400, "code": "bad", "message": None}
    }
    assert AuthSuccess().model_dump() == {}
