"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, NFT)
- Error handlers (centralized error-to-HTTP mapping)
- Request context middleware and rate limiting
- Logging configuration
- The NFT Operation Service adapter (opened and closed by the lifespan)

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from nft_connector.core.config import settings
from nft_connector.domain.nft.ports import NftOperationPort
from nft_connector.infrastructure.nft.gateway_adapter import HttpNftGatewayAdapter
from nft_connector.interfaces.health import router as health_router
from nft_connector.interfaces.nft.router import router as nft_router
from nft_connector.shared.errors.handlers import register_error_handlers
from nft_connector.shared.logging import configure_logging
from nft_connector.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)
from nft_connector.shared.security.request_context import RequestContextMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open/close the NFT gateway adapter.

    An injected port is left untouched; otherwise the HTTP gateway
    adapter is built from settings and closed on shutdown.
    """
    gateway = None
    if getattr(app.state, "nft_port", None) is None:
        gateway = HttpNftGatewayAdapter.from_settings(
            base_url=settings.nft_gateway_url,
            headers=settings.gateway_headers(),
            timeout_seconds=settings.nft_gateway_timeout_seconds,
        )
        app.state.nft_port = gateway
        logger.info("NFT gateway adapter ready: %s", settings.nft_gateway_url)

    yield

    if gateway is not None:
        await gateway.aclose()
        app.state.nft_port = None


def create_app(nft_port: NftOperationPort | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Args:
        nft_port: NFT Operation Service to use. Defaults to the HTTP
            gateway adapter built at startup.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.nft_port = nft_port

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Middleware ---
    app.add_middleware(RequestContextMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(nft_router)

    return app


app = create_app()
