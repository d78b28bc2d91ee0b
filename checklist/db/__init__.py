"""Database Metadata — SQLAlchemy declarative Base shared by ORM models and Alembic.

Invariants:
    - Engine/session lifecycle lives in infrastructure/database.py, not here
"""
