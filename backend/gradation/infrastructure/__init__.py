"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - SQLAlchemy failures no service handled are mapped to DatabaseError here
"""
