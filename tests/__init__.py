"""
Test Suite for Bookshop API

Test Organization:
- conftest.py: Shared fixtures (test settings, database, clients, sample data)
- test_books.py: Tests for the /books catalog endpoints
- test_reviews.py: Tests for the /books/{isbn}/reviews endpoints
- test_users.py: Tests for /users/register, /users/login and /users/me
- test_catalog.py, test_review_manager.py, test_auth_service.py: service layer
- test_security.py, test_config.py, test_database.py: supporting modules

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_reviews.py

    # Run with verbose output
    pytest -v
"""
