"""
Data Transfer Objects for the NFT application layer.

Path parameter bundles carry values bound from the URL path to the
query use case. They are plain frozen dataclasses with no behavior.
"""

from dataclasses import dataclass

from nft_connector.domain.nft.chains import Chain


@dataclass(frozen=True)
class PathAddressContractAddressChain:
    """Path bundle for balance lookups.

    Attributes:
        chain: Target blockchain.
        address: Owner account address.
        contract_address: NFT contract address.
    """

    chain: Chain
    address: str
    contract_address: str


@dataclass(frozen=True)
class PathChainTxId:
    """Path bundle for transaction lookups.

    Attributes:
        chain: Target blockchain.
        tx_id: Transaction hash or id.
    """

    chain: Chain
    tx_id: str


@dataclass(frozen=True)
class PathTokenIdContractAddressChain:
    """Path bundle for per-token lookups (metadata, royalty).

    Attributes:
        chain: Target blockchain.
        contract_address: NFT contract address.
        token_id: Token identifier.
    """

    chain: Chain
    contract_address: str
    token_id: str
