# Middleware package init
"""
Bookstore Backend — Middleware Package
========================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first: every later log line can use the correlation id
    2. Logging: records status and duration once the handler has answered
    3. GZip / CORS: Starlette built-ins configured in main.py
"""
