"""Services Layer — business rules orchestrating core logic around repository IO.

Invariants:
    - Services receive repositories by injection, never sessions or engines
    - Services return DTOs and raise typed ClientsApiError subclasses
"""
