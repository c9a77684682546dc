"""
Domain layer package.

Contains the chain catalogue, the error hierarchy and the port
interface of the NFT Operation Service. This layer has ZERO external
dependencies. No framework imports, no IO, no side effects.
"""
