"""API routers package.

This package contains all FastAPI routers for the application.
Each router handles a specific domain of the API.
"""

from .content import router as content_router
from .versions import router as versions_router

__all__ = [
    "content_router",
    "versions_router",
]
