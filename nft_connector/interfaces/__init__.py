"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request schemas,
and input validation. No business logic belongs here.
Routes call use cases and return their results.
"""
