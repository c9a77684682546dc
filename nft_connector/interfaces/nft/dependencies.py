"""
Dependency injection for the NFT bounded context.

Provides FastAPI dependency functions that hand the application's
NFT Operation Service to the use cases, and that bind request bodies
to their chain-specific payload models.
"""

from typing import Any

from fastapi import Body, Depends, Request

from nft_connector.application.nft.query_nft import QueryNftUseCase
from nft_connector.application.nft.submit_nft_operation import (
    SubmitNftOperationUseCase,
)
from nft_connector.domain.nft.ports import NftOperationPort
from nft_connector.interfaces.nft.schemas import (
    BURN_PAYLOADS,
    DEPLOY_PAYLOADS,
    MINT_BATCH_PAYLOADS,
    MINT_PAYLOADS,
    ROYALTY_UPDATE_PAYLOADS,
    TRANSFER_PAYLOADS,
    NftPayload,
    parse_payload,
)


def get_nft_port(request: Request) -> NftOperationPort:
    """Return the NFT Operation Service wired into the application."""
    port = getattr(request.app.state, "nft_port", None)
    if port is None:
        raise RuntimeError("NFT Operation Service is not configured")
    return port


def get_query_nft_use_case(
    nft_port: NftOperationPort = Depends(get_nft_port),
) -> QueryNftUseCase:
    """Build QueryNftUseCase with the application's NFT port."""
    return QueryNftUseCase(nft_port=nft_port)


def get_submit_nft_operation_use_case(
    nft_port: NftOperationPort = Depends(get_nft_port),
) -> SubmitNftOperationUseCase:
    """Build SubmitNftOperationUseCase with the application's NFT port."""
    return SubmitNftOperationUseCase(nft_port=nft_port)


def transfer_payload(body: dict[str, Any] = Body(...)) -> NftPayload:
    """Bind a transfer body to its chain's model."""
    return parse_payload(TRANSFER_PAYLOADS, body)


def mint_payload(body: dict[str, Any] = Body(...)) -> NftPayload:
    """Bind a mint body to its chain's model."""
    return parse_payload(MINT_PAYLOADS, body)


def mint_batch_payload(body: dict[str, Any] = Body(...)) -> NftPayload:
    """Bind a batch-mint body to its chain's model."""
    return parse_payload(MINT_BATCH_PAYLOADS, body)


def royalty_update_payload(body: dict[str, Any] = Body(...)) -> NftPayload:
    """Bind a royalty-update body to its chain's model."""
    return parse_payload(ROYALTY_UPDATE_PAYLOADS, body)


def burn_payload(body: dict[str, Any] = Body(...)) -> NftPayload:
    """Bind a burn body to its chain's model."""
    return parse_payload(BURN_PAYLOADS, body)


def deploy_payload(body: dict[str, Any] = Body(...)) -> NftPayload:
    """Bind a deploy body to its chain's model."""
    return parse_payload(DEPLOY_PAYLOADS, body)
