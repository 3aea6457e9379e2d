"""Pydantic Schemas — entity and request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies, stored records)
    - Domain enums from core/ used for enum fields

Design Decisions:
    - catalog.py holds stored entities, api.py holds endpoint-only bodies
"""
