"""
Use case: Submit a mutating NFT operation.

Input: a chain-specific payload (transfer, mint, mint batch, royalty
update, burn or deploy).
Output: the NFT Operation Service result, untouched.
Side effects: the service broadcasts a blockchain transaction.
Failure cases: NftBadRequestError, BlockchainGatewayError, NftError.
"""

import logging
from typing import Any, Awaitable, Callable

from nft_connector.application.nft.classify_failure import (
    UpstreamFailure,
    ValidationFailure,
    classify_failure,
    to_exception,
)
from nft_connector.domain.nft.ports import NftOperationPort

logger = logging.getLogger(__name__)


class SubmitNftOperationUseCase:
    """Orchestrates the mutating NFT operations.

    Each operation makes exactly one service call. Failures are
    classified and re-raised as the exception matching their category.
    """

    def __init__(self, nft_port: NftOperationPort) -> None:
        self._nft_port = nft_port

    async def transfer(self, body: Any) -> Any:
        """Transfer a token."""
        return await self._submit("transfer", self._nft_port.transfer_erc721, body)

    async def mint(self, body: Any) -> Any:
        """Mint a single token."""
        return await self._submit("mint", self._nft_port.mint_erc721, body)

    async def mint_batch(self, body: Any) -> Any:
        """Mint several tokens in one transaction."""
        return await self._submit(
            "mint_batch", self._nft_port.mint_multiple_erc721, body
        )

    async def update_royalty(self, body: Any) -> Any:
        """Update the royalty (cashback) value of a token author."""
        return await self._submit(
            "update_royalty", self._nft_port.update_cashback_for_author, body
        )

    async def burn(self, body: Any) -> Any:
        """Burn a token."""
        return await self._submit("burn", self._nft_port.burn_erc721, body)

    async def deploy(self, body: Any) -> Any:
        """Deploy a new NFT contract."""
        return await self._submit("deploy", self._nft_port.deploy_erc721, body)

    async def _submit(
        self,
        operation: str,
        call: Callable[[Any], Awaitable[Any]],
        body: Any,
    ) -> Any:
        chain = getattr(body, "chain", None)
        logger.info(
            "Submitting NFT %s on chain=%s",
            operation,
            getattr(chain, "value", chain),
        )
        try:
            return await call(body)
        except Exception as exc:
            failure = classify_failure(exc)
            if isinstance(failure, UpstreamFailure):
                logger.warning(
                    "NFT %s failed upstream with status %d",
                    operation,
                    failure.error.status_code,
                )
            elif isinstance(failure, ValidationFailure):
                logger.warning("NFT %s rejected by the service", operation)
            else:
                logger.error("NFT %s failed unexpectedly: %s", operation, failure.reason)
            error = to_exception(failure)
            if error is exc:
                raise
            raise error from exc
