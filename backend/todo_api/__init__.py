"""Todo API Package — list-query resolution engine behind a FastAPI todo service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
