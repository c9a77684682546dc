"""
Classification of NFT Operation Service failures.

A failed service call is mapped onto exactly one of three outcomes:

    ValidationFailure  the request was rejected; surfaced as 400 with
                       the original error content.
    UpstreamFailure    the blockchain layer already classified the
                       error; surfaced unchanged.
    UnexpectedFailure  anything else; wrapped under ``nft.error``.

Classification is structural: it looks at the exception type, never at
its message.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Union

from pydantic import ValidationError

from nft_connector.domain.nft.errors import (
    NFT_ERROR_CODE,
    BlockchainGatewayError,
    NftBadRequestError,
    NftError,
    NftValidationError,
)

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_TEMPLATE = "Unexpected error occurred. Reason: {reason}"


@dataclass(frozen=True)
class ValidationFailure:
    """The service rejected the request. ``payload`` is returned as-is."""

    payload: Any


@dataclass(frozen=True)
class UpstreamFailure:
    """The blockchain layer raised an already-classified error."""

    error: BlockchainGatewayError


@dataclass(frozen=True)
class UnexpectedFailure:
    """Any other failure, described by the best available reason."""

    reason: str


ClassifiedFailure = Union[ValidationFailure, UpstreamFailure, UnexpectedFailure]


def classify_failure(exc: Exception) -> ClassifiedFailure:
    """Map a service exception onto its failure category.

    Args:
        exc: The exception raised by the NFT Operation Service.

    Returns:
        The classified failure.
    """
    if isinstance(exc, NftValidationError):
        return ValidationFailure(exc.errors)
    if isinstance(exc, ValidationError):
        return ValidationFailure(
            exc.errors(include_url=False, include_context=False)
        )
    if isinstance(exc, NftError):
        return ValidationFailure(
            {"errorCode": exc.error_code, "message": exc.message}
        )
    if isinstance(exc, BlockchainGatewayError):
        return UpstreamFailure(exc)
    return UnexpectedFailure(describe_failure(exc))


def to_exception(failure: ClassifiedFailure) -> Exception:
    """Build the exception the interface layer turns into a response."""
    if isinstance(failure, ValidationFailure):
        return NftBadRequestError(failure.payload)
    if isinstance(failure, UpstreamFailure):
        return failure.error
    return unexpected_error(failure.reason)


def unexpected_error(reason: str) -> NftError:
    """Wrap a failure description into the generic ``nft.error``."""
    return NftError(UNEXPECTED_ERROR_TEMPLATE.format(reason=reason), NFT_ERROR_CODE)


def describe_failure(exc: BaseException) -> str:
    """Return the best available description of a failure.

    Priority: the error's message, then the payload of a nested HTTP
    response, then the stringified error.
    """
    message = _message_of(exc)
    if message:
        return message
    data = _response_data(exc)
    if data:
        return data if isinstance(data, str) else json.dumps(data, default=str)
    return str(exc) or repr(exc)


def _message_of(exc: BaseException) -> str | None:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    if exc.args and isinstance(exc.args[0], str) and exc.args[0]:
        return exc.args[0]
    return None


def _response_data(exc: BaseException) -> Any:
    response = getattr(exc, "response", None)
    if response is None:
        return None
    data = getattr(response, "data", None)
    if data is not None:
        return data
    read_json = getattr(response, "json", None)
    if callable(read_json):
        try:
            return read_json()
        except ValueError:
            logger.debug("Nested response payload is not JSON")
            return getattr(response, "text", None)
    return None
