"""
Services Package

This package contains business logic services that are:
- Separate from HTTP handling (routers)
- Constructed per request with an explicit database session
- Easier to test in isolation

Current services:
- auth.py: Registration, login and access token verification
- catalog.py: Read-only book catalog queries
- reviews.py: Review upsert, bulk delete and listing per book
- security.py: Password hashing and JWT utilities
- validation.py: Required-field checks shared by the services
"""
