"""Mini README: Core package initializer for Budget Board.

Budget Board is a single-user monthly budget dashboard. The package exposes
the logging factory here so scripts can grab a configured logger without
importing the heavier web or storage layers.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
