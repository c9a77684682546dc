"""
Centralized error handlers for FastAPI.

Maps NFT errors to HTTP responses:
- NftBadRequestError → 400 with the original error payload
- BlockchainGatewayError → its own status and message
- NftError → its own status (500 for ``nft.error``)
- RequestValidationError → 400 with the list of issues
- Exception → 500, never exposes internals
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from nft_connector.domain.nft.errors import (
    HTTP_BAD_REQUEST,
    HTTP_INTERNAL_ERROR,
    NFT_ERROR_CODE,
    BlockchainGatewayError,
    NftBadRequestError,
    NftError,
)

logger = logging.getLogger(__name__)


def _log_for_status(status_code: int, message: str, *args: object) -> None:
    if status_code >= HTTP_INTERNAL_ERROR:
        logger.error(message, *args)
    else:
        logger.warning(message, *args)


def register_error_handlers(app: FastAPI) -> None:
    """Register all NFT error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(NftBadRequestError)
    async def handle_bad_request(
        request: Request, exc: NftBadRequestError
    ) -> JSONResponse:
        """Return the rejected operation's error payload unchanged."""
        logger.warning("Bad request on %s", request.url.path)
        return JSONResponse(
            status_code=HTTP_BAD_REQUEST, content=jsonable_encoder(exc.payload)
        )

    @app.exception_handler(BlockchainGatewayError)
    async def handle_blockchain_gateway(
        request: Request, exc: BlockchainGatewayError
    ) -> JSONResponse:
        """Surface an upstream error with its own status and message."""
        _log_for_status(
            exc.status_code,
            "Blockchain gateway error %d on %s: %s",
            exc.status_code,
            request.url.path,
            exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(NftError)
    async def handle_nft_error(request: Request, exc: NftError) -> JSONResponse:
        """Handle NFT errors, including wrapped unexpected failures."""
        _log_for_status(
            exc.status_code,
            "NFT error %s on %s: %s",
            exc.error_code,
            request.url.path,
            exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Reject malformed path, query or body parameters."""
        issues = [
            {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
            for error in exc.errors()
        ]
        logger.warning(
            "Request validation failed on %s with %d issue(s)",
            request.url.path,
            len(issues),
        )
        return JSONResponse(status_code=HTTP_BAD_REQUEST, content=issues)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception(
            "Unexpected error on %s: %s", request.url.path, type(exc).__name__
        )
        return JSONResponse(
            status_code=HTTP_INTERNAL_ERROR,
            content={
                "statusCode": HTTP_INTERNAL_ERROR,
                "errorCode": NFT_ERROR_CODE,
                "message": "Internal server error",
            },
        )
