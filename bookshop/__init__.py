"""
Bookshop API Application Package

A small JSON API for a bookshop: browsing the catalog, reading and writing
book reviews, and user registration/login with bearer tokens.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine/session handle and declarative base
- exceptions.py: Domain error taxonomy mapped to HTTP responses
- main.py: FastAPI application factory and exception handlers
- dependencies.py: Dependency injection functions
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Business logic (catalog queries, reviews, authentication)
"""

__version__ = "0.1.0"
