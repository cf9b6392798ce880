"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter, paths taken from core.uri_builder.Route
    - Routes never contain lifecycle rules (delegated to core.order_lifecycle)
"""
