"""
FastAPI router for the NFT bounded context.

All routes delegate to use cases. No business logic here.
Bodies are bound to chain-specific Pydantic payloads.
Error mapping is handled by centralized error handlers.
Service results are returned to the client as-is.
"""

from typing import Any

from fastapi import APIRouter, Depends, Path, Query, Request, status

from nft_connector.application.nft.dtos import (
    PathAddressContractAddressChain,
    PathChainTxId,
    PathTokenIdContractAddressChain,
)
from nft_connector.application.nft.query_nft import QueryNftUseCase
from nft_connector.application.nft.submit_nft_operation import (
    SubmitNftOperationUseCase,
)
from nft_connector.domain.nft.chains import Chain
from nft_connector.interfaces.nft.dependencies import (
    burn_payload,
    deploy_payload,
    get_query_nft_use_case,
    get_submit_nft_operation_use_case,
    mint_batch_payload,
    mint_payload,
    royalty_update_payload,
    transfer_payload,
)
from nft_connector.interfaces.nft.schemas import (
    TOKEN_ID_MAX_LEN,
    ErrorResponse,
    NftPayload,
)
from nft_connector.shared.security.rate_limiting import (
    DEFAULT_RATE_LIMIT,
    MUTATING_RATE_LIMIT,
    limiter,
)

PATH_PARAM_MAX_LEN = 128

router = APIRouter(prefix="/v3/nft", tags=["nft"])

_QUERY_ERRORS = {500: {"model": ErrorResponse}}
_SUBMIT_ERRORS = {
    400: {"description": "Rejected operation"},
    500: {"model": ErrorResponse},
}


def _path_value(description: str, max_length: int = PATH_PARAM_MAX_LEN) -> Any:
    return Path(..., min_length=1, max_length=max_length, description=description)


@router.get(
    "/balance/{chain}/{contract_address}/{address}",
    responses=_QUERY_ERRORS,
    summary="Get NFT balance",
    description="List the token ids an account owns under a contract.",
)
@limiter.limit(DEFAULT_RATE_LIMIT)
async def get_balance_erc721(
    request: Request,
    chain: Chain,
    contract_address: str = _path_value("NFT contract address"),
    address: str = _path_value("Owner account address"),
    use_case: QueryNftUseCase = Depends(get_query_nft_use_case),
):
    """Return the token ids ``address`` owns."""
    path = PathAddressContractAddressChain(
        chain=chain, address=address, contract_address=contract_address
    )
    return await use_case.get_balance(path)


@router.get(
    "/transaction/{chain}/{tx_id}",
    responses=_QUERY_ERRORS,
    summary="Get NFT transaction",
)
@limiter.limit(DEFAULT_RATE_LIMIT)
async def get_transaction(
    request: Request,
    chain: Chain,
    tx_id: str = _path_value("Transaction hash"),
    use_case: QueryNftUseCase = Depends(get_query_nft_use_case),
):
    """Return the details of a transaction."""
    return await use_case.get_transaction(PathChainTxId(chain=chain, tx_id=tx_id))


@router.get(
    "/address/{chain}/{tx_id}",
    responses=_QUERY_ERRORS,
    summary="Get deployed contract address",
)
@limiter.limit(DEFAULT_RATE_LIMIT)
async def get_contract_address(
    request: Request,
    chain: Chain,
    tx_id: str = _path_value("Deploy transaction hash"),
    use_case: QueryNftUseCase = Depends(get_query_nft_use_case),
):
    """Return the address of the contract a transaction deployed."""
    return await use_case.get_contract_address(
        PathChainTxId(chain=chain, tx_id=tx_id)
    )


@router.get(
    "/metadata/{chain}/{contract_address}/{token_id}",
    responses=_QUERY_ERRORS,
    summary="Get NFT metadata",
)
@limiter.limit(DEFAULT_RATE_LIMIT)
async def get_metadata_erc721(
    request: Request,
    chain: Chain,
    contract_address: str = _path_value("NFT contract address"),
    token_id: str = _path_value("Token id", TOKEN_ID_MAX_LEN),
    account: str | None = Query(default=None, description="Owner account (Flow)"),
    use_case: QueryNftUseCase = Depends(get_query_nft_use_case),
):
    """Return the metadata of a token."""
    path = PathTokenIdContractAddressChain(
        chain=chain, contract_address=contract_address, token_id=token_id
    )
    return await use_case.get_metadata(path, account)


@router.get(
    "/royalty/{chain}/{contract_address}/{token_id}",
    responses=_QUERY_ERRORS,
    summary="Get NFT royalty",
)
@limiter.limit(DEFAULT_RATE_LIMIT)
async def get_royalty_erc721(
    request: Request,
    chain: Chain,
    contract_address: str = _path_value("NFT contract address"),
    token_id: str = _path_value("Token id", TOKEN_ID_MAX_LEN),
    use_case: QueryNftUseCase = Depends(get_query_nft_use_case),
):
    """Return the royalty record of a token."""
    path = PathTokenIdContractAddressChain(
        chain=chain, contract_address=contract_address, token_id=token_id
    )
    return await use_case.get_royalty(path)


@router.post(
    "/transaction",
    status_code=status.HTTP_200_OK,
    responses=_SUBMIT_ERRORS,
    summary="Transfer an NFT",
)
@limiter.limit(MUTATING_RATE_LIMIT)
async def transaction_erc721(
    request: Request,
    body: NftPayload = Depends(transfer_payload),
    use_case: SubmitNftOperationUseCase = Depends(get_submit_nft_operation_use_case),
):
    """Transfer a token to another account."""
    return await use_case.transfer(body)


@router.post(
    "/mint",
    status_code=status.HTTP_200_OK,
    responses=_SUBMIT_ERRORS,
    summary="Mint an NFT",
)
@limiter.limit(MUTATING_RATE_LIMIT)
async def mint_erc721(
    request: Request,
    body: NftPayload = Depends(mint_payload),
    use_case: SubmitNftOperationUseCase = Depends(get_submit_nft_operation_use_case),
):
    """Mint a single token."""
    return await use_case.mint(body)


@router.put(
    "/royalty",
    status_code=status.HTTP_200_OK,
    responses=_SUBMIT_ERRORS,
    summary="Update NFT royalty",
)
@limiter.limit(MUTATING_RATE_LIMIT)
async def update_royalty_erc721(
    request: Request,
    body: NftPayload = Depends(royalty_update_payload),
    use_case: SubmitNftOperationUseCase = Depends(get_submit_nft_operation_use_case),
):
    """Update the royalty value of a token author."""
    return await use_case.update_royalty(body)


@router.post(
    "/mint/batch",
    status_code=status.HTTP_200_OK,
    responses=_SUBMIT_ERRORS,
    summary="Mint several NFTs",
)
@limiter.limit(MUTATING_RATE_LIMIT)
async def mint_multiple_erc721(
    request: Request,
    body: NftPayload = Depends(mint_batch_payload),
    use_case: SubmitNftOperationUseCase = Depends(get_submit_nft_operation_use_case),
):
    """Mint several tokens in one transaction."""
    return await use_case.mint_batch(body)


@router.post(
    "/burn",
    status_code=status.HTTP_200_OK,
    responses=_SUBMIT_ERRORS,
    summary="Burn an NFT",
)
@limiter.limit(MUTATING_RATE_LIMIT)
async def burn_erc721(
    request: Request,
    body: NftPayload = Depends(burn_payload),
    use_case: SubmitNftOperationUseCase = Depends(get_submit_nft_operation_use_case),
):
    """Burn a token."""
    return await use_case.burn(body)


@router.post(
    "/deploy",
    status_code=status.HTTP_200_OK,
    responses=_SUBMIT_ERRORS,
    summary="Deploy an NFT contract",
)
@limiter.limit(MUTATING_RATE_LIMIT)
async def deploy_erc721(
    request: Request,
    body: NftPayload = Depends(deploy_payload),
    use_case: SubmitNftOperationUseCase = Depends(get_submit_nft_operation_use_case),
):
    """Deploy a new NFT contract."""
    return await use_case.deploy(body)
