"""Database Package — SQLAlchemy declarative Base shared by all ORM records.

Invariants:
    - All records inherit from Base (db/base.py)
"""
