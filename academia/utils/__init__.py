from .logger import configure_logging, logger

__all__ = ["configure_logging", "logger"]
