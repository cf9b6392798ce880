"""Pydantic Schemas — request validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary; failures surface as 400
    - Response documents are built by core/assembler.py, not by schemas

Design Decisions:
    - Separate from entities: schemas are wire contracts (camelCase), entities are domain
"""
