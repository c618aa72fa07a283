"""Repository Layer — data access over an AsyncSession.

Invariants:
    - Repositories never commit or roll back; the calling service owns the transaction
    - Absence is reported as None or an empty list
"""
