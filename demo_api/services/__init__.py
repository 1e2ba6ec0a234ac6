"""Services Layer — catalog accessors and their process-wide lifecycle.

Invariants:
    - One service per entity type, seeded in its constructor
    - Services never import from api/ (routes depend on services, not the reverse)
"""
