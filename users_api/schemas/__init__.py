"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Domain types from core/ are built only through the mappers in schemas/user.py

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
