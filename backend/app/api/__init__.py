"""API Layer — FastAPI routes, middleware, envelope builder and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return {meta, data} envelopes, including errors

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""
