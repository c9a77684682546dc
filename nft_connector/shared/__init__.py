"""
Shared module package.

Contains cross-cutting concerns:
- Error handling and mapping
- Request context and security headers
- Rate limiting
- Logging configuration
"""
