"""
Interfaces layer package.

FastAPI routers and Pydantic request/response schemas.
Routes validate input, call use cases and return responses.
"""
