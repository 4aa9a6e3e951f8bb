"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Wire format is camelCase (the React frontend reads camelCase keys)
    - Enum fields reuse the str Enums from core/domain_types.py

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
