"""Route Modules: one file per concern.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes never contain parsing or formatting logic (delegate to core/)
"""
