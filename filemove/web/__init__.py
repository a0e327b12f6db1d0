"""
Web API Module
==============

FastAPI transport for the file relocation engine.

Author: FileMove Project
License: MIT
"""

from .app import create_app
from .routes import api_router
from .middleware import RequestLoggingMiddleware

__all__ = ["create_app", "api_router", "RequestLoggingMiddleware"]
