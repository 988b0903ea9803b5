"""
Shared module package.

Cross-cutting concerns used across bounded contexts:
- Error translation
- Rate limiting
- Request context middleware
- Logging configuration
"""
