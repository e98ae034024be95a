"""
Services Package

Business logic that is separate from HTTP handling and easy to test in
isolation.

Current services:
- books.py: BookService, the one-storage-call-per-operation book logic
- envelope.py: Result/error → ResponseEnvelope → JSONResponse mapping
- rate_limiter.py: Rate limiting with slowapi
"""
