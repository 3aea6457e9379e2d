"""Core Layer — pure catalog logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the storage shell: filtering and ranking
      are testable without constructing a store
"""
