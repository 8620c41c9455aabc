"""Data transfer objects."""

from .base import BaseDTO
from .responses import DemoResult, DemonstrationInfo, PatternCategory

__all__ = ["BaseDTO", "DemoResult", "DemonstrationInfo", "PatternCategory"]
