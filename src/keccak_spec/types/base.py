"""Reusable base models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    A base model that converts field names to camel case when serializing.

    Assignments are validated, so a field can never be replaced by a value
    that would have been rejected at construction time.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )


class StrictBaseModel(CamelModel):
    """A strict, immutable pydantic base model."""

    model_config = CamelModel.model_config | {
        "extra": "forbid",
        "frozen": True,
        "strict": True,
    }
