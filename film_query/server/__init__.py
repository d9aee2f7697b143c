"""
Film Query Server Package.

This package contains the web server implementation of the Film Query service.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Server configuration and constants.
    exception_handlers: Exception to problem-details mapping.
    middleware: Request monitoring middleware.
    services: Business logic and service layer.
"""
