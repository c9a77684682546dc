"""
NFT Connector: HTTP surface for NFT lifecycle operations.

Application package root. Exposes balance, metadata and royalty queries
plus mint, mint-batch, transfer, burn, deploy and royalty updates for the
Celo, Ethereum and Flow blockchains. Blockchain work is delegated to an
NFT Operation Service behind a port.

Layers:
    - domain: Chains, errors, the NFT Operation Service port.
    - application: Use cases, path DTOs, failure classification.
    - infrastructure: Adapters implementing the domain port.
    - interfaces: FastAPI routers, Pydantic request schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
