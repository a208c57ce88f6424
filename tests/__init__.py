# tests\__init__.py
"""
Test Suite for ShipSmart Provincial Routing

Organization:
- top level: core logic and persistence adapters (tables, translator, search, CLI).
- `http_api`: FastAPI endpoint tests through TestClient.
"""
