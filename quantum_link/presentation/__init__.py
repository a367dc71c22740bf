"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- dependencies/: session extraction for route handlers
- errors.py: domain error → HTTP response mapping
"""
