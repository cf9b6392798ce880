"""Infrastructure — database engine, repositories, logging and seed data.

Invariants:
    - Everything that touches IO lives here; core/ stays pure
"""
