"""NFT bounded context: chains, errors and the operation port."""
