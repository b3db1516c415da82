"""
hostfacts utilities.
"""

from hostfacts.utils.logger import setup_logger

__all__ = ["setup_logger"]
