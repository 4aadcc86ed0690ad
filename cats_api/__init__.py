"""
Cats API - a REST backend for managing cats, users and AI helpers.

Application package root. A modular monolith using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - cats: CRUD over the cat catalog.
    - auth: Registration, login, email captcha, role checks.
    - ai: Text generation helpers backed by an OpenAI-compatible provider.
    - email: Outbound mail.

Layers:
    - domain: Entities, ports (ABCs), business errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (SQLAlchemy, SMTP, JWT, LLM) implementing ports.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (response envelope, errors, security, logging).
"""
