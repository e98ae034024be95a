"""
Book Catalog API Package

A CRUD REST service for books with pagination, author/title lookups
and a uniform response envelope.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and declarative base
- main.py: FastAPI application factory and exception handlers
- dependencies.py: Dependency injection functions
- errors.py: Error taxonomy and the Ok/Err result type
- pagination.py: PageRequest and Page value objects
- validation.py: Explicit input validation returning field errors
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas (including the envelope)
- repositories/: Storage gateway port and its SQLAlchemy adapter
- services/: Book service, envelope builder, rate limiting
- routers/: API route handlers
"""

__version__ = "0.1.0"
