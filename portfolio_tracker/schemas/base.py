"""Base Pydantic schemas with strict validation."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictBaseModel(BaseModel):
    """Base model that forbids extra fields.

    All API request/response models should inherit from this class
    to ensure strict contract enforcement between client and backend.

    Usage:
        class MyRequest(StrictBaseModel):
            field: str

    When to use BaseModel instead:
        - Settings/config models that need extra="ignore" for env vars
        - Models parsing external data that may have extra fields
    """

    model_config = ConfigDict(extra="forbid")


class CamelModel(StrictBaseModel):
    """Strict model exchanged with the client using camelCase JSON keys.

    Python code uses snake_case attributes (``change_percent``); the wire
    format uses the camelCase alias (``changePercent``). Both spellings are
    accepted on input, responses are always serialized by alias.
    """

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
