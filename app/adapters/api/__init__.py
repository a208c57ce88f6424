# app/adapters/api/__init__.py
"""
REST API Adapter.

HTTP entry point for the provincial routing service, built on FastAPI:
- It depends on `app.core` (use cases and models).
- It receives its services from `app.shared.container`.
- It does NOT contain routing logic.
"""

# NOTE: We do NOT import create_app here to avoid circular imports
# when the DI container wires this package.
