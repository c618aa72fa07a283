"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every endpoint answers with a JSON envelope carrying a `message`

Design Decisions:
    - Thin routes delegate to services; they only shape envelopes
"""
