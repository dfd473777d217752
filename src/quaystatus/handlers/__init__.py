"""Handler modules for the quaystatus operator."""

from . import status_handler

__all__ = ["status_handler"]
