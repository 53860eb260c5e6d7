"""
RepoBadge — badges and status pages for git repositories.

Application package root. Layered monolith:

Layers:
    - core: Configuration and shared process state (version, repo counter).
    - domain: Error taxonomy and the Result channel. No framework imports.
    - infrastructure: Boundary helpers that surface upstream failures.
    - interfaces: FastAPI routers, Pydantic schemas, HTML page templates.
    - shared: Cross-cutting concerns (error conversion and mapping, logging).
"""
