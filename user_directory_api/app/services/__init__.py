"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  The user
service works against an injected ``UserStore`` so the in-memory
collection can be swapped for a database later without changing the
API handlers.
"""
