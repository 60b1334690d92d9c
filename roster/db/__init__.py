"""Database Infrastructure - SQLAlchemy declarative Base for the document table.

Invariants:
    - All sessions are async (AsyncSession)
"""
