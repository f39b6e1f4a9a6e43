"""Services Layer — async orchestration around the pure core.

Invariants:
    - Services depend on core protocols (TodoStore), never on a concrete store
    - No HTTP types here: routes translate requests/responses
"""
