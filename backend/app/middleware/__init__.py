# Middleware package init
"""
Commerce Backend — Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate or accept a correlation ID for logging and tracing
    2. Logging: Log request details tagged with that request ID
    3. GZip / CORS: FastAPI's stock middleware

    The order is reversed for responses:
    - Request ID is added to response headers
    - Logging captures response status and duration
"""
