"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Resource documents come from core/assembler.py, never built inline

Design Decisions:
    - Thin routes: repository lookup, pure core call, save, assemble
"""
