"""
Domain-specific errors for the NFT bounded context.

All errors raised by the NFT Operation Service or by the use cases
must be defined here. These are mapped to HTTP responses at the
interface layer. No framework imports allowed.
"""

from typing import Any

NFT_ERROR_CODE = "nft.error"
HTTP_BAD_REQUEST = 400
HTTP_INTERNAL_ERROR = 500


class NftConnectorError(Exception):
    """Base error for all NFT connector errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class NftError(NftConnectorError):
    """A failure of an NFT operation identified by an error code.

    Raised by the operation service for business-rule violations, and
    by the use cases to wrap unexpected failures under ``nft.error``.
    """

    def __init__(
        self,
        message: str,
        error_code: str = NFT_ERROR_CODE,
        status_code: int = HTTP_INTERNAL_ERROR,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON error body."""
        return {
            "statusCode": self.status_code,
            "errorCode": self.error_code,
            "message": self.message,
        }


class NftValidationError(NftConnectorError):
    """Raised when a request fails input-shape or business-rule checks.

    Carries the list of individual validation issues.
    """

    def __init__(self, errors: list[Any]) -> None:
        super().__init__(f"Validation failed with {len(errors)} issue(s)")
        self.errors = errors


class BlockchainGatewayError(NftConnectorError):
    """An already-classified failure reported by the blockchain layer.

    Its status and message are surfaced to the client unchanged.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON error body."""
        return {
            "statusCode": self.status_code,
            "errorCode": self.error_code,
            "message": self.message,
        }


class NftBadRequestError(NftConnectorError):
    """Raised by the use cases when a submitted operation is rejected.

    ``payload`` is the original error content and becomes the response
    body as-is.
    """

    def __init__(self, payload: Any) -> None:
        super().__init__("Bad request")
        self.payload = payload
