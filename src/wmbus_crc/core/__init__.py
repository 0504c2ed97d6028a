"""Core application functionality."""

from .config import Settings, setup_logging
from .models import ChecksumResult, DemoReport

__all__ = [
    "ChecksumResult",
    "DemoReport",
    "Settings",
    "setup_logging",
]
