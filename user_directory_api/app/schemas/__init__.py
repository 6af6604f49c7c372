"""
Pydantic schema definitions for API payloads.

Schemas are separated from the store records to decouple the API
representation (``nombre`` on the wire) from in-memory storage.
"""
