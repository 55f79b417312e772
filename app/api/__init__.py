"""API module initialization."""
from .digest import router as digest_router
from .health import router as health_router

__all__ = ["digest_router", "health_router"]
