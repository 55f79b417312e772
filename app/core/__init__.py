"""Core application modules."""
from .config import settings, PlatformConfig

__all__ = ["settings", "PlatformConfig"]
