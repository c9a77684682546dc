"""
Supported blockchain networks.

Every NFT request targets exactly one of these chains.
"""

from enum import Enum


class Chain(str, Enum):
    """Blockchain a request targets. Values are the wire identifiers."""

    CELO = "CELO"
    ETH = "ETH"
    FLOW = "FLOW"


class FeeCurrency(str, Enum):
    """Currencies a Celo transaction fee can be paid in."""

    CELO = "CELO"
    CUSD = "CUSD"
    CEUR = "CEUR"


SUPPORTED_CHAINS: tuple[Chain, ...] = tuple(Chain)
