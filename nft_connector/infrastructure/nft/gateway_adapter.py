"""
HTTP adapter for the NFT Operation Service.

Relays every NFT operation to a remote blockchain gateway exposing the
``/v3/nft`` API (e.g. Tatum) over a shared ``httpx.AsyncClient``.

Error mapping:
    400 with a ``data`` list  ──▶  NftValidationError(data)
    any other error status    ──▶  BlockchainGatewayError(status, ...)
    transport failures        ──▶  propagated unchanged

Successful JSON responses are returned as decoded, without reshaping.
Path parameters are percent-encoded segment by segment before they are
sent, so a value never reaches a different gateway route.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from nft_connector.domain.nft.chains import Chain
from nft_connector.domain.nft.errors import (
    HTTP_BAD_REQUEST,
    BlockchainGatewayError,
    NftValidationError,
)
from nft_connector.domain.nft.ports import NftOperationPort

logger = logging.getLogger(__name__)

API_PREFIX = "/v3/nft"


def _gateway_path(*segments: str) -> str:
    """Join path segments, escaping each so it stays a single segment."""
    escaped = []
    for segment in segments:
        value = quote(segment, safe="")
        # Dot segments would be collapsed by URL normalisation.
        if value in (".", ".."):
            value = value.replace(".", "%2E")
        escaped.append(value)
    return "/" + "/".join(escaped)


def _payload_json(body: Any) -> Any:
    """Serialize a payload model to its camelCase JSON form."""
    dump = getattr(body, "model_dump", None)
    if callable(dump):
        return dump(mode="json", by_alias=True, exclude_none=True)
    return body


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _raise_for_gateway_error(response: httpx.Response) -> None:
    if response.is_success:
        return
    payload = _decode(response)
    if isinstance(payload, dict):
        if response.status_code == HTTP_BAD_REQUEST and isinstance(
            payload.get("data"), list
        ):
            raise NftValidationError(payload["data"])
        message = payload.get("message") or response.reason_phrase
        error_code = payload.get("errorCode")
    else:
        message = payload or response.reason_phrase
        error_code = None
    raise BlockchainGatewayError(response.status_code, str(message), error_code)


class HttpNftGatewayAdapter(NftOperationPort):
    """NftOperationPort backed by a remote NFT gateway.

    Args:
        client: An ``httpx.AsyncClient`` whose ``base_url`` points at
            the gateway. The adapter does not own the client unless it
            is built with ``from_settings``.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @classmethod
    def from_settings(
        cls,
        base_url: str,
        headers: dict[str, str],
        timeout_seconds: float,
    ) -> "HttpNftGatewayAdapter":
        """Build an adapter with its own client."""
        client = httpx.AsyncClient(
            base_url=base_url, headers=headers, timeout=timeout_seconds
        )
        return cls(client)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        body: Any = None,
    ) -> Any:
        url = f"{API_PREFIX}{path}"
        logger.debug("Gateway %s %s", method, url)
        response = await self._client.request(
            method,
            url,
            params=params,
            json=_payload_json(body) if body is not None else None,
        )
        _raise_for_gateway_error(response)
        return _decode(response)

    async def get_tokens_of_owner(
        self, chain: Chain, address: str, contract_address: str
    ) -> Any:
        return await self._request(
            "GET", _gateway_path("balance", chain.value, contract_address, address)
        )

    async def get_transaction(self, chain: Chain, tx_id: str) -> Any:
        return await self._request(
            "GET", _gateway_path("transaction", chain.value, tx_id)
        )

    async def get_contract_address(self, chain: Chain, tx_id: str) -> Any:
        return await self._request(
            "GET", _gateway_path("address", chain.value, tx_id)
        )

    async def get_metadata_erc721(
        self,
        chain: Chain,
        token_id: str,
        contract_address: str,
        account: str | None = None,
    ) -> Any:
        params = {"account": account} if account is not None else None
        return await self._request(
            "GET",
            _gateway_path("metadata", chain.value, contract_address, token_id),
            params=params,
        )

    async def get_royalty_erc721(
        self, chain: Chain, token_id: str, contract_address: str
    ) -> Any:
        return await self._request(
            "GET", _gateway_path("royalty", chain.value, contract_address, token_id)
        )

    async def transfer_erc721(self, body: Any) -> Any:
        return await self._request("POST", "/transaction", body=body)

    async def mint_erc721(self, body: Any) -> Any:
        return await self._request("POST", "/mint", body=body)

    async def mint_multiple_erc721(self, body: Any) -> Any:
        return await self._request("POST", "/mint/batch", body=body)

    async def update_cashback_for_author(self, body: Any) -> Any:
        return await self._request("PUT", "/royalty", body=body)

    async def burn_erc721(self, body: Any) -> Any:
        return await self._request("POST", "/burn", body=body)

    async def deploy_erc721(self, body: Any) -> Any:
        return await self._request("POST", "/deploy", body=body)
