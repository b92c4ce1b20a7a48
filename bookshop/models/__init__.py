"""
SQLAlchemy Models Package

Model Relationships:
- Book <-> Review: One-to-Many (a book holds its review list,
                   each review points back at its book)
- User <-> Review: One-to-Many, optional (a review may record its writer)

Import all models here to:
1. Make them available as: from bookshop.models import Book, Review, User
2. Ensure Alembic discovers them for migrations
"""

from bookshop.models.book import Book
from bookshop.models.review import Review
from bookshop.models.user import User

__all__ = [
    "Book",
    "Review",
    "User",
]
