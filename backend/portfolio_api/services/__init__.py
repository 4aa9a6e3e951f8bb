"""Services Layer: orchestration that sits between routes and core.

Invariants:
    - Services own the IO ordering (validate, persist, notify); core stays pure
"""
