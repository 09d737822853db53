"""Pydantic Schemas — API contracts for responses.

Invariants:
    - Schemas describe the wire format (camelCase), models describe persistence
    - Every response body is an ApiResponse envelope

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
