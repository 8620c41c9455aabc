"""Response DTOs returned by the catalog service."""
from enum import Enum
from typing import List

from pydantic import Field

from patterncatalog.application.dto.base import BaseDTO


class PatternCategory(str, Enum):
    """Gang-of-Four pattern categories."""
    BEHAVIORAL = "behavioral"
    CREATIONAL = "creational"
    STRUCTURAL = "structural"


class DemonstrationInfo(BaseDTO):
    """Describes one registered demonstration."""
    name: str
    category: PatternCategory
    summary: str = ""


class DemoResult(BaseDTO):
    """Lines a demonstration produced, in order."""
    name: str
    category: PatternCategory
    lines: List[str] = Field(default_factory=list)
