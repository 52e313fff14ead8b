from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LineModel(BaseModel):
    """
    Base for platform payloads.

    Unknown fields are kept (the platform adds fields over time) and are
    re-emitted by ``model_dump``.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class CamelModel(LineModel):
    """Payload whose wire names are camelCase (most Messaging API bodies)."""
    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        alias_generator=to_camel,
    )
