"""Strict, immutable base model shared by every serializable value."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictBaseModel(BaseModel):
    """
    A frozen pydantic model that rejects unknown fields and implicit coercion.

    Field names are exposed as camel case aliases when serializing, so a
    `proof_steps` attribute is written as `proofSteps` in JSON.
    Construction by the Python field name stays allowed.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        arbitrary_types_allowed=True,
        extra="forbid",
        frozen=True,
        strict=True,
    )
