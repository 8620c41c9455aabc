"""Base domain exceptions - shared by every pattern module."""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured output."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainException):
    """Raised when domain validation fails."""


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(self, entity_type: str, entity_id: str):
        super().__init__(
            f"{entity_type} with ID {entity_id} not found",
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class InvalidIndexError(DomainException):
    """Raised when an indexed collection is accessed outside its bounds."""

    def __init__(self, index: int, size: int):
        super().__init__(
            f"Index {index} is out of range for {size} item(s)",
            "INVALID_INDEX",
            {"index": index, "size": size},
        )
        self.index = index
        self.size = size


class UnsupportedVariantError(DomainException):
    """Raised when a resolver is given a variant tag it cannot map."""

    def __init__(self, family: str, variant: Any):
        super().__init__(
            f"{family} does not support variant '{variant}'",
            "UNSUPPORTED_VARIANT",
            {"family": family, "variant": str(variant)},
        )
        self.family = family
        self.variant = variant


class InvalidStateTransitionError(DomainException):
    """Raised when attempting an invalid state transition."""

    def __init__(self, current_state: str, attempted: str):
        super().__init__(
            f"Cannot apply {attempted} while in state {current_state}",
            "INVALID_STATE_TRANSITION",
            {"current_state": current_state, "attempted": attempted},
        )
        self.current_state = current_state
        self.attempted = attempted
