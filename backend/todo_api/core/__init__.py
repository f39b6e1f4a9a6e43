"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, schemas/, infrastructure/, models/ or db/
    - All functions are pure and deterministic; the only async code is Protocol declarations

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
