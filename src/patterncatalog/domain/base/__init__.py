"""Base domain layer - shared kernel for all pattern modules."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    InvalidIndexError,
    InvalidStateTransitionError,
    UnsupportedVariantError,
    ValidationError,
)
from .ports import NullOutput, OutputPort
from .value_objects import ValueObject

__all__: list[str] = [
    "ConfigurationError",
    "DomainException",
    "EntityNotFoundError",
    "InvalidIndexError",
    "InvalidStateTransitionError",
    "NullOutput",
    "OutputPort",
    "UnsupportedVariantError",
    "ValidationError",
    "ValueObject",
]
