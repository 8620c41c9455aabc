"""Base value object - immutable payloads with no behavior of their own."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are frozen: two instances with the same fields are equal and
    neither can be changed after construction.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
