from .config import Settings, setup_logging

__all__ = ["Settings", "setup_logging"]
