"""
Shared error handling package.

Centralizes failure-to-HTTP mapping so that store failures
are consistently translated into API responses.
"""
