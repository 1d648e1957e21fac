"""Demo Server Application Package: minimal HTTP/JSON demo API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
