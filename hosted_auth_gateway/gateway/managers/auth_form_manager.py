import logging

from starlette.responses import RedirectResponse

from hosted_auth_gateway.gateway.auth.auth_client_factory import AuthClientFactory
from hosted_auth_gateway.gateway.auth.models.auth_result import (
    AuthFailure,
    AuthResult,
    AuthSuccess,
)
from hosted_auth_gateway.gateway.models.credential_submission import (
    CredentialSubmission,
)
from hosted_auth_gateway.gateway.models.redirect_target import RedirectTarget
from hosted_auth_gateway.gateway.utilities.auth_gateway_config import (
    AuthGatewayConfig,
)
from hosted_auth_gateway.gateway.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["AUTH"])


class AuthFormManager:
    """Forward login and signup form submissions to the identity provider."""

    def __init__(
        self,
        *,
        auth_client_factory: AuthClientFactory,
        config: AuthGatewayConfig,
    ) -> None:
        self._auth_client_factory = auth_client_factory
        if self._auth_client_factory is None:
            raise ValueError("auth_client_factory must not be None")
        if not isinstance(self._auth_client_factory, AuthClientFactory):
            raise TypeError(
                "auth_client_factory must be an instance of AuthClientFactory"
            )
        self._config = config
        if self._config is None:
            raise ValueError("config must not be None")
        if not isinstance(self._config, AuthGatewayConfig):
            raise TypeError("config must be an instance of AuthGatewayConfig")

    async def login(self, *, submission: CredentialSubmission) -> RedirectResponse:
        async with self._auth_client_factory.create_auth_client() as auth_client:
            result: AuthResult = await auth_client.sign_in(
                email=submission.email,
                password=submission.password,
            )
        return self.build_redirect(result)

    async def signup(self, *, submission: CredentialSubmission) -> RedirectResponse:
        """
        Create the account and ask the provider to e-mail a verification link
        pointing at ``{site_url}/verify``.

        A successful signup goes straight to the dashboard; the account is not
        required to be verified first.
        """
        email_redirect_to: str = self._config.email_redirect_url
        async with self._auth_client_factory.create_auth_client() as auth_client:
            result: AuthResult = await auth_client.sign_up(
                email=submission.email,
                password=submission.password,
                email_redirect_to=email_redirect_to,
            )
        return self.build_redirect(result)

    @staticmethod
    def get_redirect_target(result: AuthResult) -> RedirectTarget:
        match result:
            case AuthFailure():
                return RedirectTarget.ERROR_PAGE
            case AuthSuccess():
                return RedirectTarget.DASHBOARD
            case _:
                raise TypeError(f"Unexpected auth result: {type(result).__name__}")

    def build_redirect(self, result: AuthResult) -> RedirectResponse:
        target = self.get_redirect_target(result)
        # 303 so the browser follows the POST with a GET
        return RedirectResponse(url=target.value, status_code=303)
