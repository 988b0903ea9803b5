"""
Composer Catalog: HTTP CRUD service for composer records.

Application package root. A small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - catalog: Composer records, their validation and persistence.

Layers:
    - domain: Entities, field constraints, failure values, ports (ABCs).
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (SQLAlchemy store) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, rate limiting, logging).
"""
