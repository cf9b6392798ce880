"""Core Layer — pure domain logic, no IO, no DB, no HTTP.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
    - Functions are deterministic; the only async code is in the repository Protocols

Design Decisions:
    - Functional core separated from imperative shell: entities, lifecycle and
      assemblers are testable without a database or an app instance
"""
