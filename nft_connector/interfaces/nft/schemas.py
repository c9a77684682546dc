"""
Pydantic schemas for NFT API request validation.

Each mutating operation accepts one payload shape per chain. The shape
is selected explicitly by the ``chain`` field through a dispatch table
(``chain → model``), then validated by that model.
JSON fields are camelCase; Python attributes are snake_case.
No business logic belongs here.
"""

from typing import Annotated, Any, Literal, Mapping, Optional

from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from nft_connector.domain.nft.chains import Chain, FeeCurrency

EVM_ADDRESS_LEN = 42
FLOW_ADDRESS_LEN = 18
EVM_PRIVATE_KEY_LEN = 66
FLOW_PRIVATE_KEY_LEN = 64
SIGNATURE_ID_LEN = 36
TOKEN_ID_MAX_LEN = 78
URL_MAX_LEN = 256

EvmAddress = Annotated[
    str, Field(min_length=EVM_ADDRESS_LEN, max_length=EVM_ADDRESS_LEN)
]
FlowAddress = Annotated[
    str, Field(min_length=FLOW_ADDRESS_LEN, max_length=FLOW_ADDRESS_LEN)
]
TokenId = Annotated[str, Field(pattern=r"^\d+$", max_length=TOKEN_ID_MAX_LEN)]
NumericString = Annotated[str, Field(pattern=r"^\d+(\.\d+)?$")]
MetadataUrl = Annotated[str, Field(min_length=1, max_length=URL_MAX_LEN)]
FlowContractAddress = Annotated[str, Field(min_length=1, max_length=128)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NftPayload(_CamelModel):
    """Base of every operation payload."""

    chain: Chain


class Fee(_CamelModel):
    """Custom gas settings for an Ethereum transaction."""

    gas_limit: NumericString
    gas_price: NumericString


class _EvmSigned(NftPayload):
    """Payload signed with a private key or a KMS signature id."""

    from_private_key: Optional[str] = Field(
        default=None, min_length=EVM_PRIVATE_KEY_LEN, max_length=EVM_PRIVATE_KEY_LEN
    )
    signature_id: Optional[str] = Field(
        default=None, min_length=SIGNATURE_ID_LEN, max_length=SIGNATURE_ID_LEN
    )
    index: Optional[int] = Field(default=None, ge=0)
    nonce: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _exactly_one_signer(self) -> "_EvmSigned":
        if (self.from_private_key is None) == (self.signature_id is None):
            raise ValueError(
                "exactly one of fromPrivateKey or signatureId must be set"
            )
        return self


class _FlowSigned(NftPayload):
    """Flow payload signed by ``account``."""

    account: FlowAddress
    private_key: Optional[str] = Field(
        default=None,
        min_length=FLOW_PRIVATE_KEY_LEN,
        max_length=FLOW_PRIVATE_KEY_LEN,
    )
    signature_id: Optional[str] = Field(
        default=None, min_length=SIGNATURE_ID_LEN, max_length=SIGNATURE_ID_LEN
    )
    index: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _exactly_one_signer(self) -> "_FlowSigned":
        if (self.private_key is None) == (self.signature_id is None):
            raise ValueError("exactly one of privateKey or signatureId must be set")
        return self


class _EthFee(_CamelModel):
    fee: Optional[Fee] = None


class _CeloFee(_CamelModel):
    fee_currency: FeeCurrency


# --- Transfer ---------------------------------------------------------


class _EvmTransfer(_EvmSigned):
    to: EvmAddress
    token_id: TokenId
    contract_address: EvmAddress
    provenance: Optional[bool] = None
    value: Optional[NumericString] = None


class EthTransferErc721(_EvmTransfer, _EthFee):
    """Transfer an ERC-721 token on Ethereum."""

    chain: Literal[Chain.ETH]


class CeloTransferErc721(_EvmTransfer, _CeloFee):
    """Transfer an ERC-721 token on Celo."""

    chain: Literal[Chain.CELO]


class FlowTransferNft(_FlowSigned):
    """Transfer an NFT on Flow."""

    chain: Literal[Chain.FLOW]
    to: FlowAddress
    token_id: TokenId
    contract_address: FlowContractAddress


# --- Mint -------------------------------------------------------------


def _check_royalties(
    author_addresses: Optional[list[Any]], cashback_values: Optional[list[Any]]
) -> None:
    if author_addresses is None and cashback_values is None:
        return
    if author_addresses is None or cashback_values is None:
        raise ValueError("authorAddresses and cashbackValues must be set together")
    if len(author_addresses) != len(cashback_values):
        raise ValueError("authorAddresses and cashbackValues must have equal length")


class _EvmMint(_EvmSigned):
    to: EvmAddress
    token_id: TokenId
    contract_address: EvmAddress
    url: MetadataUrl
    minter: Optional[EvmAddress] = None
    author_addresses: Optional[list[EvmAddress]] = None
    cashback_values: Optional[list[NumericString]] = None
    fixed_values: Optional[list[NumericString]] = None
    erc20: Optional[EvmAddress] = None
    provenance: Optional[bool] = None

    @model_validator(mode="after")
    def _royalties_match(self) -> "_EvmMint":
        _check_royalties(self.author_addresses, self.cashback_values)
        return self


class EthMintErc721(_EvmMint, _EthFee):
    """Mint an ERC-721 token on Ethereum."""

    chain: Literal[Chain.ETH]


class CeloMintErc721(_EvmMint, _CeloFee):
    """Mint an ERC-721 token on Celo."""

    chain: Literal[Chain.CELO]


class FlowMintNft(_FlowSigned):
    """Mint an NFT on Flow."""

    chain: Literal[Chain.FLOW]
    to: FlowAddress
    url: MetadataUrl
    contract_address: FlowContractAddress


# --- Mint batch -------------------------------------------------------


class _EvmMintMultiple(_EvmSigned):
    to: list[EvmAddress] = Field(min_length=1)
    token_id: list[TokenId] = Field(min_length=1)
    url: list[MetadataUrl] = Field(min_length=1)
    contract_address: EvmAddress
    minter: Optional[EvmAddress] = None
    author_addresses: Optional[list[list[EvmAddress]]] = None
    cashback_values: Optional[list[list[NumericString]]] = None
    fixed_values: Optional[list[list[NumericString]]] = None
    erc20: Optional[EvmAddress] = None
    provenance: Optional[bool] = None

    @model_validator(mode="after")
    def _lists_match(self) -> "_EvmMintMultiple":
        if not len(self.to) == len(self.token_id) == len(self.url):
            raise ValueError("to, tokenId and url must have equal length")
        _check_royalties(self.author_addresses, self.cashback_values)
        if self.author_addresses is not None:
            if len(self.author_addresses) != len(self.to):
                raise ValueError("authorAddresses must have one entry per token")
            for authors, values in zip(self.author_addresses, self.cashback_values):
                _check_royalties(authors, values)
        return self


class EthMintMultipleErc721(_EvmMintMultiple, _EthFee):
    """Mint several ERC-721 tokens on Ethereum."""

    chain: Literal[Chain.ETH]


class CeloMintMultipleErc721(_EvmMintMultiple, _CeloFee):
    """Mint several ERC-721 tokens on Celo."""

    chain: Literal[Chain.CELO]


class FlowMintMultipleNft(_FlowSigned):
    """Mint several NFTs on Flow."""

    chain: Literal[Chain.FLOW]
    to: list[FlowAddress] = Field(min_length=1)
    url: list[MetadataUrl] = Field(min_length=1)
    contract_address: FlowContractAddress

    @model_validator(mode="after")
    def _lists_match(self) -> "FlowMintMultipleNft":
        if len(self.to) != len(self.url):
            raise ValueError("to and url must have equal length")
        return self


# --- Burn -------------------------------------------------------------


class _EvmBurn(_EvmSigned):
    token_id: TokenId
    contract_address: EvmAddress


class EthBurnErc721(_EvmBurn, _EthFee):
    """Burn an ERC-721 token on Ethereum."""

    chain: Literal[Chain.ETH]


class CeloBurnErc721(_EvmBurn, _CeloFee):
    """Burn an ERC-721 token on Celo."""

    chain: Literal[Chain.CELO]


class FlowBurnNft(_FlowSigned):
    """Burn an NFT on Flow."""

    chain: Literal[Chain.FLOW]
    token_id: TokenId
    contract_address: FlowContractAddress


# --- Deploy -----------------------------------------------------------


class _EvmDeploy(_EvmSigned):
    name: str = Field(min_length=1, max_length=100)
    symbol: str = Field(min_length=1, max_length=30)
    provenance: Optional[bool] = None
    cashback: Optional[bool] = None
    public_mint: Optional[bool] = None


class EthDeployErc721(_EvmDeploy, _EthFee):
    """Deploy an ERC-721 contract on Ethereum."""

    chain: Literal[Chain.ETH]


class CeloDeployErc721(_EvmDeploy, _CeloFee):
    """Deploy an ERC-721 contract on Celo."""

    chain: Literal[Chain.CELO]


class FlowDeployNft(_FlowSigned):
    """Deploy an NFT contract on Flow."""

    chain: Literal[Chain.FLOW]


# --- Royalty update ---------------------------------------------------


class _EvmUpdateCashback(_EvmSigned):
    token_id: TokenId
    contract_address: EvmAddress
    cashback_value: NumericString


class UpdateCashbackErc721(_EvmUpdateCashback, _EthFee):
    """Update the author royalty of a token on Ethereum."""

    chain: Literal[Chain.ETH]


class CeloUpdateCashbackErc721(_EvmUpdateCashback, _CeloFee):
    """Update the author royalty of a token on Celo."""

    chain: Literal[Chain.CELO]


# --- Dispatch tables --------------------------------------------------

PayloadTable = Mapping[Chain, type[NftPayload]]

TRANSFER_PAYLOADS: PayloadTable = {
    Chain.CELO: CeloTransferErc721,
    Chain.ETH: EthTransferErc721,
    Chain.FLOW: FlowTransferNft,
}
MINT_PAYLOADS: PayloadTable = {
    Chain.CELO: CeloMintErc721,
    Chain.ETH: EthMintErc721,
    Chain.FLOW: FlowMintNft,
}
MINT_BATCH_PAYLOADS: PayloadTable = {
    Chain.CELO: CeloMintMultipleErc721,
    Chain.ETH: EthMintMultipleErc721,
    Chain.FLOW: FlowMintMultipleNft,
}
BURN_PAYLOADS: PayloadTable = {
    Chain.CELO: CeloBurnErc721,
    Chain.ETH: EthBurnErc721,
    Chain.FLOW: FlowBurnNft,
}
DEPLOY_PAYLOADS: PayloadTable = {
    Chain.CELO: CeloDeployErc721,
    Chain.ETH: EthDeployErc721,
    Chain.FLOW: FlowDeployNft,
}
ROYALTY_UPDATE_PAYLOADS: PayloadTable = {
    Chain.CELO: CeloUpdateCashbackErc721,
    Chain.ETH: UpdateCashbackErc721,
}


def parse_payload(table: PayloadTable, body: Any) -> NftPayload:
    """Validate ``body`` against the model its ``chain`` selects.

    Args:
        table: Dispatch table of the operation.
        body: Decoded JSON request body.

    Returns:
        The validated payload model.

    Raises:
        RequestValidationError: If the chain is missing or unsupported
            for this operation, or the body does not fit its model.
    """
    chain = body.get("chain") if isinstance(body, dict) else None
    model = table.get(chain) if isinstance(chain, str) else None
    if model is None:
        expected = ", ".join(c.value for c in table)
        raise RequestValidationError(
            [
                {
                    "type": "union_tag_invalid",
                    "loc": ("body", "chain"),
                    "msg": f"Input tag {chain!r} does not match any of the "
                    f"expected tags: {expected}",
                }
            ],
            body=body,
        )
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise RequestValidationError(
            [
                {**error, "loc": ("body", *error["loc"])}
                for error in exc.errors(include_url=False, include_context=False)
            ],
            body=body,
        ) from exc


class ErrorResponse(BaseModel):
    """Standard error response body."""

    status_code: int = Field(alias="statusCode")
    error_code: Optional[str] = Field(default=None, alias="errorCode")
    message: str


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str
    chains: list[Chain]
