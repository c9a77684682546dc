"""
Use case: Read-only NFT lookups.

Input: path bundles from the URL (and an optional account for metadata).
Output: the NFT Operation Service result, untouched.
Side effects: None.
Failure cases: every failure is wrapped into NftError ``nft.error``.
"""

import logging
from typing import Any, Awaitable

from nft_connector.application.nft.classify_failure import (
    describe_failure,
    unexpected_error,
)
from nft_connector.application.nft.dtos import (
    PathAddressContractAddressChain,
    PathChainTxId,
    PathTokenIdContractAddressChain,
)
from nft_connector.domain.nft.ports import NftOperationPort

logger = logging.getLogger(__name__)


class QueryNftUseCase:
    """Orchestrates the read-only NFT lookups.

    Lookups have no request body, so no failure is ever reported as a
    client error: anything the service raises becomes ``nft.error``.
    """

    def __init__(self, nft_port: NftOperationPort) -> None:
        self._nft_port = nft_port

    async def get_balance(self, path: PathAddressContractAddressChain) -> Any:
        """Return the token ids owned by ``path.address``."""
        logger.info("Fetching NFT balance on chain=%s", path.chain.value)
        return await self._run(
            self._nft_port.get_tokens_of_owner(
                path.chain, path.address, path.contract_address
            )
        )

    async def get_transaction(self, path: PathChainTxId) -> Any:
        """Return the details of a transaction."""
        logger.info("Fetching NFT transaction on chain=%s", path.chain.value)
        return await self._run(
            self._nft_port.get_transaction(path.chain, path.tx_id)
        )

    async def get_contract_address(self, path: PathChainTxId) -> Any:
        """Return the address of the contract deployed by a transaction."""
        logger.info("Fetching NFT contract address on chain=%s", path.chain.value)
        return await self._run(
            self._nft_port.get_contract_address(path.chain, path.tx_id)
        )

    async def get_metadata(
        self, path: PathTokenIdContractAddressChain, account: str | None
    ) -> Any:
        """Return the metadata of a token.

        Args:
            path: Chain, contract address and token id.
            account: Optional owner account, forwarded as given.
        """
        logger.info("Fetching NFT metadata on chain=%s", path.chain.value)
        return await self._run(
            self._nft_port.get_metadata_erc721(
                path.chain, path.token_id, path.contract_address, account
            )
        )

    async def get_royalty(self, path: PathTokenIdContractAddressChain) -> Any:
        """Return the royalty record of a token."""
        logger.info("Fetching NFT royalty on chain=%s", path.chain.value)
        return await self._run(
            self._nft_port.get_royalty_erc721(
                path.chain, path.token_id, path.contract_address
            )
        )

    async def _run(self, call: Awaitable[Any]) -> Any:
        try:
            return await call
        except Exception as exc:
            logger.warning("NFT lookup failed: %s", type(exc).__name__)
            raise unexpected_error(describe_failure(exc)) from exc
