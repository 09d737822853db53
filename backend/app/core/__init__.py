"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions are pure and deterministic (the clock read in iso_time aside)
    - Repository access only through the Protocols in repository_protocols.py

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
