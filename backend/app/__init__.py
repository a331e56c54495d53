"""
Commerce Backend — Application Package Initializer
===================================================

What: Marks the `app` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (Data Access + Rules)  │  ← CRUD, inventory check
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes receive their service through FastAPI dependencies; services
    receive the request's database session in their constructor. Nothing
    reaches the database through module-level state.
"""

__version__ = "1.0.0"
