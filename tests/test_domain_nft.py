"""
Tests for the NFT domain layer.

Tests chains and error classes in isolation.
No external dependencies or IO required.
"""

from nft_connector.domain.nft import errors
from nft_connector.domain.nft.chains import SUPPORTED_CHAINS, Chain
from nft_connector.domain.nft.errors import (
    BlockchainGatewayError,
    NftBadRequestError,
    NftConnectorError,
    NftError,
    NftValidationError,
)


class TestChain:
    """Tests for the Chain enum."""

    def test_wire_values(self) -> None:
        assert [c.value for c in SUPPORTED_CHAINS] == ["CELO", "ETH", "FLOW"]

    def test_compares_equal_to_wire_value(self) -> None:
        assert Chain("ETH") is Chain.ETH
        assert Chain.FLOW == "FLOW"


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_nft_error_defaults_to_generic_500(self) -> None:
        error = NftError("boom")
        assert error.error_code == "nft.error"
        assert error.status_code == 500
        assert error.to_dict() == {
            "statusCode": 500,
            "errorCode": "nft.error",
            "message": "boom",
        }

    def test_validation_error_keeps_issues(self) -> None:
        error = NftValidationError([{"field": "to"}, {"field": "url"}])
        assert error.errors == [{"field": "to"}, {"field": "url"}]
        assert "2 issue(s)" in error.message

    def test_gateway_error_serialization(self) -> None:
        error = BlockchainGatewayError(429, "Too many requests", "rate.limit")
        assert str(error) == "Too many requests"
        assert error.to_dict() == {
            "statusCode": 429,
            "errorCode": "rate.limit",
            "message": "Too many requests",
        }

    def test_bad_request_keeps_payload_identity(self) -> None:
        payload = [{"field": "to"}]
        assert NftBadRequestError(payload).payload is payload

    def test_hierarchy(self) -> None:
        for error in (
            NftError("x"),
            NftValidationError([]),
            BlockchainGatewayError(500, "x"),
            NftBadRequestError(None),
        ):
            assert isinstance(error, NftConnectorError)

    def test_status_constants_are_the_ones_mapped(self) -> None:
        constants = {
            name: value for name, value in vars(errors).items()
            if name.startswith("HTTP_")
        }
        assert constants == {"HTTP_BAD_REQUEST": 400, "HTTP_INTERNAL_ERROR": 500}
