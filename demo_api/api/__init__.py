"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Unknown routes and methods keep the framework's default 404/405

Design Decisions:
    - Thin routes delegate to services
"""
