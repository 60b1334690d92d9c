"""Pydantic Schemas - request/response validation for the roster endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
