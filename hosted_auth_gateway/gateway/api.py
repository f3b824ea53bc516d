import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from starlette.requests import Request

from hosted_auth_gateway.gateway.api_container import get_auth_gateway_config
from hosted_auth_gateway.gateway.auth.exceptions.auth_provider_not_configured_exception import (
    AuthProviderNotConfiguredException,
)
from hosted_auth_gateway.gateway.routers.auth_form_router import AuthFormRouter
from hosted_auth_gateway.gateway.utilities.auth_gateway_config import (
    AuthGatewayConfig,
)
from hosted_auth_gateway.gateway.utilities.endpoint_filter import EndpointFilter
from hosted_auth_gateway.gateway.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["INITIALIZATION"])

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# disable logging calls to /health endpoint
uvicorn_logger = logging.getLogger("uvicorn.access")
uvicorn_logger.addFilter(EndpointFilter(paths=["/health"]))


@asynccontextmanager
async def lifespan(app1: FastAPI) -> AsyncGenerator[None, None]:
    worker_id = id(app1)
    try:
        logger.info(f"Starting application initialization for worker {worker_id}...")

        # settings are read once here and reused by every request
        config: AuthGatewayConfig = get_auth_gateway_config()
        logger.info(f"Site url: {config.site_url}")
        if config.auth_provider_url is None:
            logger.warning("AUTH_PROVIDER_URL is not set; login and signup will fail")

        logger.info(f"Application initialization completed for worker {worker_id}")
        yield

    except Exception as e:
        logger.exception(e, stack_info=True)
        raise

    finally:
        logger.info(f"Application shutdown completed for worker {worker_id}")


async def auth_provider_not_configured_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    assert isinstance(exc, AuthProviderNotConfiguredException)
    logger.error(f"Rejecting {request.method} {request.url.path}: {exc.message}")
    return JSONResponse({"detail": exc.message}, status_code=500)


def create_app() -> FastAPI:
    app1: FastAPI = FastAPI(title="Hosted Auth Gateway", lifespan=lifespan)
    app1.include_router(AuthFormRouter().get_router())
    app1.add_exception_handler(
        AuthProviderNotConfiguredException, auth_provider_not_configured_handler
    )

    @app1.api_route("/health", methods=["GET", "POST"])
    async def health() -> str:
        return "OK"

    return app1


# Create the FastAPI app instance
app = create_app()
