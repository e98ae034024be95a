"""
API Routers Package

FastAPI routers that handle API endpoints.

Router Structure:
- books.py: /api/v1/books/* endpoints

Each router is imported and registered in main.py.
"""

from book_catalog.routers.books import router as books_router

__all__ = [
    "books_router",
]
