"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All responses are text/html

Design Decisions:
    - Thin routes delegate to core/ functions
"""
