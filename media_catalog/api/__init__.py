"""API Layer — FastAPI routes, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every error body is {"message": str}

Design Decisions:
    - Thin routes delegate to the injected CatalogStorage
"""
