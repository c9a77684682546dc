"""
Application layer package.

Contains use cases that orchestrate calls to the NFT Operation Service
port and classify its failures. Depends only on the domain layer.
"""
