"""Infrastructure Layer — storage implementation and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ protocols; core never imports from here

Design Decisions:
    - Storage lives behind CatalogStorage so routes never see MemStorage directly
"""
