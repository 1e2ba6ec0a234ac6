"""Demo Catalog API — read-only product and user listings over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"

# Matches [project].name in pyproject.toml
SERVICE_NAME = "demo-api"
