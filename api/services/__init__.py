"""Service layer for business logic.

Services encapsulate all business logic, keeping routes thin and focused
on HTTP handling.

Layer hierarchy:
    Routes (HTTP) -> Services (Business Logic) -> Repositories (Database)

Services should:
- Run existence, uniqueness and reference checks before writing
- Compute merged records for partial updates (see services.crud)
- Raise the typed errors in services.errors (or per-resource subclasses)
- Return pydantic data models, not ORM rows

Services should NOT:
- Directly execute SQL queries (use repositories)
- Know about HTTP request/response details or status codes
- Commit transactions (the request's session dependency does)
"""
