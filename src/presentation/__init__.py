"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers, auth dependencies, middleware and error
responses. It is thin: it builds commands/queries (with the caller's
SessionContext), dispatches them to handlers and translates Results to HTTP
responses.

Structure:
- routers/system.py: root and health
- routers/api/middleware/: trace IDs and bearer-token authentication
- routers/api/v1/: API version 1 resources and error responses
"""
