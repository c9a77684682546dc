"""
Port interface (ABC) for the NFT bounded context.

The NFT Operation Service performs the actual blockchain interaction:
signing, broadcasting and contract encoding. Infrastructure adapters
implement this interface; the use cases only ever see the port.
"""

from abc import ABC, abstractmethod
from typing import Any

from nft_connector.domain.nft.chains import Chain


class NftOperationPort(ABC):
    """Port for the NFT Operation Service.

    One coroutine per HTTP operation. Results are opaque values that
    are returned to the client untouched. Failures are raised as
    exceptions, preferably from ``nft_connector.domain.nft.errors``.
    """

    @abstractmethod
    async def get_tokens_of_owner(
        self, chain: Chain, address: str, contract_address: str
    ) -> Any:
        """Return the token ids ``address`` owns under ``contract_address``."""
        raise NotImplementedError

    @abstractmethod
    async def get_transaction(self, chain: Chain, tx_id: str) -> Any:
        """Return the details of transaction ``tx_id``."""
        raise NotImplementedError

    @abstractmethod
    async def get_contract_address(self, chain: Chain, tx_id: str) -> Any:
        """Return the address of the contract deployed by ``tx_id``."""
        raise NotImplementedError

    @abstractmethod
    async def get_metadata_erc721(
        self,
        chain: Chain,
        token_id: str,
        contract_address: str,
        account: str | None = None,
    ) -> Any:
        """Return the metadata of a token.

        Args:
            chain: Target blockchain.
            token_id: Token identifier.
            contract_address: NFT contract address.
            account: Owner account, required by Flow only.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_royalty_erc721(
        self, chain: Chain, token_id: str, contract_address: str
    ) -> Any:
        """Return the royalty (cashback) record of a token."""
        raise NotImplementedError

    @abstractmethod
    async def transfer_erc721(self, body: Any) -> Any:
        """Transfer a token. Returns the transaction id."""
        raise NotImplementedError

    @abstractmethod
    async def mint_erc721(self, body: Any) -> Any:
        """Mint a single token. Returns the transaction id."""
        raise NotImplementedError

    @abstractmethod
    async def mint_multiple_erc721(self, body: Any) -> Any:
        """Mint several tokens at once."""
        raise NotImplementedError

    @abstractmethod
    async def update_cashback_for_author(self, body: Any) -> Any:
        """Update the royalty value of a token author."""
        raise NotImplementedError

    @abstractmethod
    async def burn_erc721(self, body: Any) -> Any:
        """Burn a token. Returns the transaction id."""
        raise NotImplementedError

    @abstractmethod
    async def deploy_erc721(self, body: Any) -> Any:
        """Deploy a new NFT contract."""
        raise NotImplementedError
