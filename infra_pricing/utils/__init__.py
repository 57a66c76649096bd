"""
Utility modules for the infrastructure pricing engine.
"""

from .logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
