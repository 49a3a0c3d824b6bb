"""Shared base for transfer objects."""

from typing import Annotated, ClassVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


def not_blank(value: str) -> str:
    """Reject strings made only of whitespace; the value itself is kept as sent."""
    if not value.strip():
        raise PydanticCustomError("string_blank", "String should not be blank")
    return value


# A required text field: absent, null, empty and whitespace-only all fail
RequiredStr = Annotated[str, Field(min_length=1), AfterValidator(not_blank)]


class Dto(BaseModel):
    """
    Base transfer object.

    Serialises with camelCase names and accepts either camelCase or the
    Python field names on input. ``messages`` maps a field name to the
    client-facing message for each constraint kind (``required``,
    ``max_length``, ``range``).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    messages: ClassVar[dict[str, dict[str, str]]] = {}
