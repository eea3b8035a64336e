"""
Pydantic schema definitions for API payloads.

Schemas are separated from the stored records to decouple the API
representation (for example, never exposing password hashes) from
the record store.
"""
