"""
API Routers Package

Router Structure:
- books.py: /books/* catalog endpoints
- reviews.py: /books/{isbn}/reviews endpoints
- users.py: /users/* endpoints (registration, login)

Each router is imported and registered in main.py.
"""

from bookshop.routers.books import router as books_router
from bookshop.routers.reviews import router as reviews_router
from bookshop.routers.users import router as users_router

__all__ = [
    "books_router",
    "reviews_router",
    "users_router",
]
