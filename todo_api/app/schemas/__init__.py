"""
Pydantic schema definitions for API payloads.

Schemas are separated from the stored MongoDB documents to decouple the
API representation (string ``id``) from persistence (``_id`` ObjectId).
"""
