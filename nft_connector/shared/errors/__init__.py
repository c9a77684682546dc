"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that NFT errors
are consistently translated into API responses.
"""
