"""Infrastructure Layer — database access, store implementations, logging.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
    - All SQLAlchemy failures mapped to DatabaseError before leaving this layer
"""
