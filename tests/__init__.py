"""
Test Suite for the Book Catalog API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data, fake gateway)
- test_books.py: HTTP tests for /api/v1/books endpoints
- test_error_handling.py: Envelope mapping for 405/404/500 and parse errors
- test_book_service.py: BookService against an in-memory gateway
- test_envelope.py: Envelope builder and serialization
- test_validation.py: Explicit input validation
- test_repository.py: SQLAlchemy gateway against SQLite
- test_pagination.py: PageRequest / Page arithmetic
- test_rate_limiter.py: client keying and the 429 envelope

Running Tests:
    pytest
    pytest tests/test_books.py -v
"""
