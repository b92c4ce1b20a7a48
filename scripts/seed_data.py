#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with the sample bookshop catalog.

USAGE:
    # From the project root, with SECRET_KEY and DATABASE_URL set
    python scripts/seed_data.py

This script:
1. Connects to the database using app settings
2. Creates missing tables and clears existing data
3. Creates five users, five books and one review per book
4. Links every review into its book's review list
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from bookshop.config import get_settings
from bookshop.database import Database
from bookshop.models import Book, Review, User
from bookshop.services.security import hash_password

USERS = [
    {"username": f"user{i}", "email": f"user{i}@example.com", "password": f"password{i}"}
    for i in range(1, 6)
]

BOOKS = [
    {"isbn": "978-3-16-148410-0", "title": "Example Book 1", "author": "Author 1"},
    {"isbn": "978-3-16-148411-7", "title": "Example Book 2", "author": "Author 2"},
    {"isbn": "978-3-16-148412-4", "title": "Example Book 3", "author": "Author 3"},
    {"isbn": "978-3-16-148413-1", "title": "Example Book 4", "author": "Author 4"},
    {"isbn": "978-3-16-148414-8", "title": "Example Book 5", "author": "Author 5"},
]

# (rating, comment) for user N reviewing book N
REVIEWS = [
    (5, "Great book!"),
    (4, "Enjoyed it!"),
    (3, "It was okay."),
    (2, "Not great."),
    (1, "Didn't like it."),
]


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Review))
    db.execute(delete(Book))
    db.execute(delete(User))
    db.commit()
    print("Data cleared.")


def create_users(db: Session) -> list[User]:
    """Create sample users with hashed passwords."""
    print("Creating users...")
    users = [
        User(
            username=data["username"],
            email=data["email"],
            hashed_password=hash_password(data["password"]),
        )
        for data in USERS
    ]
    db.add_all(users)
    db.commit()
    print(f"Created {len(users)} users.")
    return users


def create_books(db: Session) -> list[Book]:
    """Create sample books."""
    print("Creating books...")
    books = [Book(**data) for data in BOOKS]
    db.add_all(books)
    db.commit()
    print(f"Created {len(books)} books.")
    return books


def create_reviews(db: Session, users: list[User], books: list[Book]) -> None:
    """Create one review per book and link it into the book's review list."""
    print("Creating reviews...")
    for user, book, (rating, comment) in zip(users, books, REVIEWS):
        book.reviews.append(Review(user_id=user.id, rating=rating, comment=comment))
    db.commit()
    print(f"Created {len(REVIEWS)} reviews.")


def seed_database(db: Session) -> None:
    clear_data(db)
    users = create_users(db)
    books = create_books(db)
    create_reviews(db, users, books)


def main() -> None:
    """Main entry point for the seed script."""
    print("=" * 60)
    print("Bookshop API - Database Seed Script")
    print("=" * 60)

    database = Database(get_settings())
    database.create_tables()

    db = database.session()
    try:
        seed_database(db)
        print("Sample data created successfully")
    except Exception as e:
        print(f"\nError seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()
        database.dispose()


if __name__ == "__main__":
    main()
