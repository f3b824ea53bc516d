import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Sequence

from fastapi import APIRouter, Depends, Request, params
from fastapi.responses import FileResponse, Response

from hosted_auth_gateway.gateway.api_container import get_auth_form_manager
from hosted_auth_gateway.gateway.managers.auth_form_manager import AuthFormManager
from hosted_auth_gateway.gateway.models.credential_submission import (
    CredentialSubmission,
)
from hosted_auth_gateway.gateway.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["AUTH"])


class AuthFormRouter:
    """Router that renders the login/signup forms and handles their submissions."""

    _login_route: str = "/login"
    _signup_route: str = "/signup"
    _login_template_filename: str = "login.html"
    _signup_template_filename: str = "signup.html"

    def __init__(
        self,
        *,
        prefix: str = "",
        tags: list[str | Enum] | None = None,
        dependencies: Sequence[params.Depends] | None = None,
    ) -> None:
        self.prefix = prefix
        self.tags = tags or ["auth"]
        self.dependencies = dependencies or []
        self.router = APIRouter(
            prefix=self.prefix, tags=self.tags, dependencies=self.dependencies
        )
        static_path: Path = Path(__file__).resolve().parents[2] / "static"
        self._login_template_path: Path = static_path / self._login_template_filename
        self._signup_template_path: Path = static_path / self._signup_template_filename
        for template_path in (self._login_template_path, self._signup_template_path):
            if not template_path.exists():
                raise FileNotFoundError(f"Form template not found at {template_path}")
        self._register_routes()

    def _register_routes(self) -> None:
        self.router.add_api_route(
            self._login_route,
            self.render_login_form,
            methods=["GET"],
            response_class=FileResponse,
            include_in_schema=False,
        )
        self.router.add_api_route(
            self._login_route,
            self.submit_login_form,
            methods=["POST"],
            include_in_schema=False,
        )
        self.router.add_api_route(
            self._signup_route,
            self.render_signup_form,
            methods=["GET"],
            response_class=FileResponse,
            include_in_schema=False,
        )
        self.router.add_api_route(
            self._signup_route,
            self.submit_signup_form,
            methods=["POST"],
            include_in_schema=False,
        )

    async def render_login_form(self) -> FileResponse:
        return FileResponse(path=self._login_template_path, media_type="text/html")

    async def render_signup_form(self) -> FileResponse:
        return FileResponse(path=self._signup_template_path, media_type="text/html")

    async def submit_login_form(
        self,
        request: Request,
        auth_form_manager: Annotated[AuthFormManager, Depends(get_auth_form_manager)],
    ) -> Response:
        logger.debug("Login form submitted")
        return await auth_form_manager.login(
            submission=await self.read_submission(request)
        )

    async def submit_signup_form(
        self,
        request: Request,
        auth_form_manager: Annotated[AuthFormManager, Depends(get_auth_form_manager)],
    ) -> Response:
        logger.debug("Signup form submitted")
        return await auth_form_manager.signup(
            submission=await self.read_submission(request)
        )

    @staticmethod
    async def read_submission(request: Request) -> CredentialSubmission:
        """
        Take the fields exactly as posted: an empty value stays "" and only an
        absent field becomes None.
        """
        form = await request.form()
        email = form.get("email")
        password = form.get("password")
        return CredentialSubmission(
            email=email if isinstance(email, str) else None,
            password=password if isinstance(password, str) else None,
        )

    def get_router(self) -> APIRouter:
        return self.router
