"""Core Layer: pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Stateful collaborators (rate limiter) reach core only through Protocols

Design Decisions:
    - Functional core separated from imperative shell (ADR: gate checks testable without HTTP)
"""
