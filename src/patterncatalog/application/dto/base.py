"""Base DTO class with stable API and clean snake_case format."""
from typing import Dict, Any
from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """
    Base class for all DTOs.

    Provides a stable to_dict() API so callers never touch the pydantic
    methods directly.
    """
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain snake_case dictionary."""
        return self.model_dump(mode="json")
