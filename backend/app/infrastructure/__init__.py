"""Infrastructure Layer — database access, repositories, and logging setup.

Invariants:
    - SQLAlchemy errors never leave this layer untranslated (DatabaseError)
    - Repositories implement the Protocols declared in core/repository_protocols.py
"""
