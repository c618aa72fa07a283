"""Services Layer — exhibition and university workflows.

Invariants:
    - Services own transaction boundaries; repositories never commit
    - One service class per aggregate family (main exhibitions, university submissions)
"""
