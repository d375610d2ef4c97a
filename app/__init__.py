"""
Users API — demonstration REST service for managing user records.

Application package root. A small modular monolith using hexagonal
architecture (ports & adapters), backed by a non-persistent in-memory
store.

Bounded contexts:
    - users: Listing, lookup, creation, partial update and deletion of users.

Layers:
    - domain: Entities and the repository port. No framework imports.
    - application: UserService use cases and DTOs.
    - infrastructure: In-memory repository adapter and demo seed data.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, validation, pagination,
      middleware, security, logging).
"""
