from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SITE_URL: str = "http://localhost:3001"
EMAIL_VERIFICATION_PATH: str = "/verify"


class AuthGatewayConfig(BaseSettings):
    """
    Settings read from the environment once per process.

    Empty variables count as unset so SITE_URL="" still falls back to
    DEFAULT_SITE_URL.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    # public origin of the site, used to build the e-mail verification link
    site_url: str = DEFAULT_SITE_URL

    # hosted identity provider (GoTrue compatible)
    auth_provider_url: Optional[str] = None
    auth_provider_api_key: Optional[str] = None
    # None means the provider call is never cut short
    auth_provider_timeout_seconds: Optional[float] = None

    @property
    def email_redirect_url(self) -> str:
        return f"{self.site_url}{EMAIL_VERIFICATION_PATH}"
