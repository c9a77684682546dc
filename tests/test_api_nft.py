"""
Tests for the NFT API endpoints.

Tests FastAPI routes against an in-memory NFT Operation Service.
Validates parameter binding, pass-through responses, and error mapping.
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from nft_connector.domain.nft.chains import Chain
from nft_connector.domain.nft.errors import (
    BlockchainGatewayError,
    NftError,
    NftValidationError,
)
from nft_connector.domain.nft.ports import NftOperationPort
from nft_connector.infrastructure.nft.gateway_adapter import HttpNftGatewayAdapter
from nft_connector.interfaces.nft.schemas import (
    TOKEN_ID_MAX_LEN,
    CeloTransferErc721,
    EthMintErc721,
    FlowBurnNft,
)
from nft_connector.main import create_app
from nft_connector.shared.security.rate_limiting import limiter

EVM_TO = "0x" + "a" * 40
EVM_CONTRACT = "0x" + "b" * 40
EVM_KEY = "0x" + "c" * 64
FLOW_ACCOUNT = "0x" + "d" * 16
FLOW_KEY = "e" * 64
SIGNATURE_ID = "26d3883e-4e17-48b3-a0ee-09a3e484ac83"


class FakeNftPort(NftOperationPort):
    """Records every call and answers with ``result`` or raises ``error``."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.result: Any = None
        self.error: Exception | None = None

    async def _answer(self, name: str, *args: Any) -> Any:
        self.calls.append((name, args))
        if self.error is not None:
            raise self.error
        return self.result

    async def get_tokens_of_owner(self, chain, address, contract_address):
        return await self._answer("get_tokens_of_owner", chain, address, contract_address)

    async def get_transaction(self, chain, tx_id):
        return await self._answer("get_transaction", chain, tx_id)

    async def get_contract_address(self, chain, tx_id):
        return await self._answer("get_contract_address", chain, tx_id)

    async def get_metadata_erc721(self, chain, token_id, contract_address, account=None):
        return await self._answer(
            "get_metadata_erc721", chain, token_id, contract_address, account
        )

    async def get_royalty_erc721(self, chain, token_id, contract_address):
        return await self._answer("get_royalty_erc721", chain, token_id, contract_address)

    async def transfer_erc721(self, body):
        return await self._answer("transfer_erc721", body)

    async def mint_erc721(self, body):
        return await self._answer("mint_erc721", body)

    async def mint_multiple_erc721(self, body):
        return await self._answer("mint_multiple_erc721", body)

    async def update_cashback_for_author(self, body):
        return await self._answer("update_cashback_for_author", body)

    async def burn_erc721(self, body):
        return await self._answer("burn_erc721", body)

    async def deploy_erc721(self, body):
        return await self._answer("deploy_erc721", body)


def _eth_mint() -> dict[str, Any]:
    return {
        "chain": "ETH",
        "to": EVM_TO,
        "tokenId": "1",
        "contractAddress": EVM_CONTRACT,
        "url": "https://example.com/nft/1.json",
        "fromPrivateKey": EVM_KEY,
    }


def _celo_transfer() -> dict[str, Any]:
    return {
        "chain": "CELO",
        "to": EVM_TO,
        "tokenId": "7",
        "contractAddress": EVM_CONTRACT,
        "feeCurrency": "CUSD",
        "signatureId": SIGNATURE_ID,
    }


def _flow_burn() -> dict[str, Any]:
    return {
        "chain": "FLOW",
        "tokenId": "5",
        "contractAddress": "9e8a6cc4-1e6d-4c51-9d0e-2b7b3a2c7e11",
        "account": FLOW_ACCOUNT,
        "privateKey": FLOW_KEY,
    }


def _eth_mint_batch() -> dict[str, Any]:
    return {
        "chain": "ETH",
        "to": [EVM_TO, EVM_TO],
        "tokenId": ["1", "2"],
        "url": ["https://example.com/1.json", "https://example.com/2.json"],
        "contractAddress": EVM_CONTRACT,
        "fromPrivateKey": EVM_KEY,
    }


def _celo_royalty_update() -> dict[str, Any]:
    return {
        "chain": "CELO",
        "tokenId": "1",
        "contractAddress": EVM_CONTRACT,
        "cashbackValue": "0.5",
        "feeCurrency": "CELO",
        "fromPrivateKey": EVM_KEY,
    }


def _eth_deploy() -> dict[str, Any]:
    return {
        "chain": "ETH",
        "name": "My Collection",
        "symbol": "MYC",
        "fromPrivateKey": EVM_KEY,
    }


MUTATIONS = [
    ("post", "/v3/nft/transaction", _celo_transfer, "transfer_erc721"),
    ("post", "/v3/nft/mint", _eth_mint, "mint_erc721"),
    ("post", "/v3/nft/mint/batch", _eth_mint_batch, "mint_multiple_erc721"),
    ("put", "/v3/nft/royalty", _celo_royalty_update, "update_cashback_for_author"),
    ("post", "/v3/nft/burn", _flow_burn, "burn_erc721"),
    ("post", "/v3/nft/deploy", _eth_deploy, "deploy_erc721"),
]

QUERIES = [
    "/v3/nft/balance/ETH/0xabc/0xdef",
    "/v3/nft/transaction/CELO/0xtx",
    "/v3/nft/address/ETH/0xtx",
    "/v3/nft/metadata/FLOW/contract/1?account=0x01",
    "/v3/nft/royalty/CELO/0xabc/1",
]


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def port() -> FakeNftPort:
    return FakeNftPort()


@pytest.fixture
def client(port: FakeNftPort) -> TestClient:
    return TestClient(create_app(nft_port=port))


class TestQueryEndpoints:
    """Tests for the read-only GET endpoints."""

    def test_balance_passes_service_result_through(self, client, port) -> None:
        port.result = ["1", "2"]
        response = client.get("/v3/nft/balance/ETH/0xabc/0xdef")
        assert response.status_code == 200
        assert response.json() == ["1", "2"]

    def test_balance_binds_path_in_service_order(self, client, port) -> None:
        port.result = []
        client.get("/v3/nft/balance/ETH/0xabc/0xdef")
        assert port.calls == [("get_tokens_of_owner", (Chain.ETH, "0xdef", "0xabc"))]

    def test_transaction_lookup(self, client, port) -> None:
        port.result = {"blockNumber": 12, "status": True}
        response = client.get("/v3/nft/transaction/CELO/0xtx")
        assert response.status_code == 200
        assert response.json() == {"blockNumber": 12, "status": True}
        assert port.calls == [("get_transaction", (Chain.CELO, "0xtx"))]

    def test_contract_address_lookup(self, client, port) -> None:
        port.result = {"contractAddress": EVM_CONTRACT}
        response = client.get("/v3/nft/address/ETH/0xdeploy")
        assert response.json() == {"contractAddress": EVM_CONTRACT}
        assert port.calls == [("get_contract_address", (Chain.ETH, "0xdeploy"))]

    def test_metadata_forwards_account(self, client, port) -> None:
        port.result = {"data": "ipfs://meta"}
        response = client.get("/v3/nft/metadata/FLOW/contract/42?account=0x01")
        assert response.status_code == 200
        assert port.calls == [
            ("get_metadata_erc721", (Chain.FLOW, "42", "contract", "0x01"))
        ]

    def test_metadata_without_account(self, client, port) -> None:
        port.result = {"data": "ipfs://meta"}
        client.get("/v3/nft/metadata/ETH/0xabc/42")
        assert port.calls == [("get_metadata_erc721", (Chain.ETH, "42", "0xabc", None))]

    @pytest.mark.parametrize("kind", ["metadata", "royalty"])
    def test_token_id_length_matches_body_limit(self, client, port, kind) -> None:
        port.result = {}
        longest = "9" * TOKEN_ID_MAX_LEN
        accepted = client.get(f"/v3/nft/{kind}/ETH/0xabc/{longest}")
        rejected = client.get(f"/v3/nft/{kind}/ETH/0xabc/{longest}9")
        assert accepted.status_code == 200
        assert rejected.status_code == 400
        assert len(port.calls) == 1

    def test_royalty_lookup(self, client, port) -> None:
        port.result = {"addresses": [EVM_TO], "values": ["0.5"]}
        response = client.get("/v3/nft/royalty/CELO/0xabc/1")
        assert response.json() == {"addresses": [EVM_TO], "values": ["0.5"]}
        assert port.calls == [("get_royalty_erc721", (Chain.CELO, "1", "0xabc"))]

    def test_unknown_chain_rejected(self, client, port) -> None:
        response = client.get("/v3/nft/balance/BTC/0xabc/0xdef")
        assert response.status_code == 400
        assert port.calls == []

    @pytest.mark.parametrize("url", QUERIES)
    def test_any_failure_is_wrapped_as_nft_error(self, client, port, url) -> None:
        port.error = NftValidationError([{"field": "to"}])
        response = client.get(url)
        assert response.status_code == 500
        body = response.json()
        assert body["errorCode"] == "nft.error"
        assert body["message"].startswith("Unexpected error occurred. Reason: ")

    def test_upstream_error_is_wrapped_for_queries(self, client, port) -> None:
        port.error = BlockchainGatewayError(403, "Insufficient funds", "balance.low")
        response = client.get("/v3/nft/transaction/ETH/0xtx")
        assert response.status_code == 500
        assert response.json()["message"] == (
            "Unexpected error occurred. Reason: Insufficient funds"
        )


class TestMutatingEndpoints:
    """Tests for the POST/PUT endpoints."""

    @pytest.mark.parametrize("method,url,payload,operation", MUTATIONS)
    def test_success_is_200_and_passed_through(
        self, client, port, method, url, payload, operation
    ) -> None:
        port.result = {"txId": "0xfeed"}
        response = client.request(method, url, json=payload())
        assert response.status_code == 200
        assert response.json() == {"txId": "0xfeed"}
        assert [name for name, _ in port.calls] == [operation]

    def test_body_is_bound_to_chain_model(self, client, port) -> None:
        port.result = {"txId": "0x1"}
        client.post("/v3/nft/mint", json=_eth_mint())
        _, (body,) = port.calls[0]
        assert isinstance(body, EthMintErc721)
        assert body.token_id == "1"
        assert body.from_private_key == EVM_KEY

    def test_celo_transfer_bound_to_celo_model(self, client, port) -> None:
        port.result = {"txId": "0x1"}
        client.post("/v3/nft/transaction", json=_celo_transfer())
        _, (body,) = port.calls[0]
        assert isinstance(body, CeloTransferErc721)
        assert body.fee_currency.value == "CUSD"

    def test_flow_burn_bound_to_flow_model(self, client, port) -> None:
        port.result = {"txId": "0x1"}
        client.post("/v3/nft/burn", json=_flow_burn())
        _, (body,) = port.calls[0]
        assert isinstance(body, FlowBurnNft)
        assert body.account == FLOW_ACCOUNT

    def test_batch_mint_may_return_a_list(self, client, port) -> None:
        port.result = [{"txId": "0x1"}, {"txId": "0x2"}]
        response = client.post("/v3/nft/mint/batch", json=_eth_mint_batch())
        assert response.json() == [{"txId": "0x1"}, {"txId": "0x2"}]

    @pytest.mark.parametrize("method,url,payload,operation", MUTATIONS)
    def test_validation_array_from_service_is_400(
        self, client, port, method, url, payload, operation
    ) -> None:
        port.error = NftValidationError([{"field": "to"}])
        response = client.request(method, url, json=payload())
        assert response.status_code == 400
        assert response.json() == [{"field": "to"}]

    @pytest.mark.parametrize("method,url,payload,operation", MUTATIONS)
    def test_nft_error_from_service_is_400(
        self, client, port, method, url, payload, operation
    ) -> None:
        port.error = NftError("Token already exists", "nft.mint.exists")
        response = client.request(method, url, json=payload())
        assert response.status_code == 400
        assert response.json() == {
            "errorCode": "nft.mint.exists",
            "message": "Token already exists",
        }

    @pytest.mark.parametrize("method,url,payload,operation", MUTATIONS)
    def test_upstream_error_keeps_status_and_message(
        self, client, port, method, url, payload, operation
    ) -> None:
        port.error = BlockchainGatewayError(403, "Insufficient funds", "balance.low")
        response = client.request(method, url, json=payload())
        assert response.status_code == 403
        assert response.json() == {
            "statusCode": 403,
            "errorCode": "balance.low",
            "message": "Insufficient funds",
        }

    def test_runtime_error_is_500_with_reason(self, client, port) -> None:
        port.error = RuntimeError("timeout")
        response = client.post("/v3/nft/burn", json=_flow_burn())
        assert response.status_code == 500
        assert response.json()["message"] == (
            "Unexpected error occurred. Reason: timeout"
        )
        assert response.json()["errorCode"] == "nft.error"


class TestRequestValidation:
    """Tests for body binding through the chain dispatch tables."""

    def test_unknown_chain_rejected(self, client, port) -> None:
        payload = _eth_mint() | {"chain": "BTC"}
        response = client.post("/v3/nft/mint", json=payload)
        assert response.status_code == 400
        assert response.json()[0]["loc"] == ["body", "chain"]
        assert port.calls == []

    def test_missing_chain_rejected(self, client, port) -> None:
        payload = _eth_mint()
        del payload["chain"]
        response = client.post("/v3/nft/mint", json=payload)
        assert response.status_code == 400
        assert port.calls == []

    def test_flow_not_supported_for_royalty_update(self, client, port) -> None:
        payload = _celo_royalty_update() | {"chain": "FLOW"}
        response = client.put("/v3/nft/royalty", json=payload)
        assert response.status_code == 400
        assert port.calls == []

    def test_both_signers_rejected(self, client, port) -> None:
        payload = _eth_mint() | {"signatureId": SIGNATURE_ID}
        response = client.post("/v3/nft/mint", json=payload)
        assert response.status_code == 400
        assert port.calls == []

    def test_celo_requires_fee_currency(self, client, port) -> None:
        payload = _celo_transfer()
        del payload["feeCurrency"]
        response = client.post("/v3/nft/transaction", json=payload)
        assert response.status_code == 400
        locs = [issue["loc"] for issue in response.json()]
        assert ["body", "feeCurrency"] in locs

    def test_batch_lists_must_match(self, client, port) -> None:
        payload = _eth_mint_batch() | {"tokenId": ["1"]}
        response = client.post("/v3/nft/mint/batch", json=payload)
        assert response.status_code == 400
        assert port.calls == []

    def test_non_object_body_rejected(self, client, port) -> None:
        response = client.post("/v3/nft/burn", json=["not", "an", "object"])
        assert response.status_code == 400
        assert port.calls == []


class TestCrossCutting:
    """Tests for health, response headers and rate limiting."""

    def test_health(self, client) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["chains"] == ["CELO", "ETH", "FLOW"]

    def test_security_headers_present(self, client, port) -> None:
        port.result = []
        response = client.get("/v3/nft/balance/ETH/0xabc/0xdef")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["Cache-Control"] == "no-store"

    def test_request_id_echoed(self, client) -> None:
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"

    def test_request_id_generated(self, client) -> None:
        response = client.get("/health")
        assert len(response.headers["X-Request-ID"]) == 32

    def test_mutating_rate_limit_returns_429(self, client, port) -> None:
        port.result = {"txId": "0x1"}
        statuses = [
            client.post("/v3/nft/burn", json=_flow_burn()).status_code
            for _ in range(31)
        ]
        assert statuses[:30] == [200] * 30
        assert statuses[30] == 429

    def test_lifespan_builds_gateway_adapter(self) -> None:
        app = create_app()
        with TestClient(app) as client:
            assert isinstance(app.state.nft_port, HttpNftGatewayAdapter)
            assert client.get("/health").status_code == 200
        assert app.state.nft_port is None
