"""Strict, immutable pydantic base models shared by the registry types."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Unknown fields are rejected and no coercion between types is attempted.
    Instances cannot be mutated once validated.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )


class DocumentModel(BaseModel):
    """
    An immutable model for documents written by other tools.

    Unlike `StrictBaseModel`, unknown keys are ignored so that newer writers
    can add fields without breaking older readers.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )
