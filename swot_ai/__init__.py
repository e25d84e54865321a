"""SWOT AI Proxy Application Package.

This package contains the core application components:
- models: Pydantic models for request/response validation
- routers: API route handlers
- services: prompt rendering and the Gemini relay
- utils: error types and helpers
"""

__version__ = "0.1.0"
