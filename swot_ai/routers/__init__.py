"""API route handlers.

This module contains FastAPI routers for:
- the action proxy endpoint (POST /api/proxy)
"""
