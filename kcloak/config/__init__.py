"""Environment-driven configuration for KCloak clients."""
from .settings import ClientSettings, load_settings

__all__ = ["ClientSettings", "load_settings"]
