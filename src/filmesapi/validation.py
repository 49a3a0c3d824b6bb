"""Validation of inbound and patched transfer objects.

Both call sites go through :func:`validate`: the :func:`body_of` dependency
before a route body runs, and the patch services after a JSON Patch document
has been applied. Failures are raised as a single
:class:`~filmesapi.exceptions.ValidationError` carrying every violation.
"""

from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

import pydantic
from fastapi import Body
from pydantic.alias_generators import to_camel
from pydantic_core import ErrorDetails

from filmesapi.exceptions import FieldViolation, ValidationError
from filmesapi.schemas.base import Dto

DtoT = TypeVar("DtoT", bound=Dto)

_RANGE_ERRORS = {"greater_than", "greater_than_equal", "less_than", "less_than_equal"}


def validate(model: type[DtoT], data: Any) -> DtoT:
    """Build ``model`` from ``data`` or raise with all violated fields."""
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError(violations_from_errors(model, exc.errors())) from exc


def request_schema(model: type[Dto]) -> dict[str, Any]:
    """
    JSON schema of ``model`` with nested definitions inlined.

    Used to document a body that :func:`body_of` receives untyped; ``$ref``
    pointers would otherwise resolve against the OpenAPI document root.
    """
    schema = model.model_json_schema(by_alias=True)
    definitions = schema.pop("$defs", {})

    def inline(node: Any) -> Any:
        if isinstance(node, dict):
            if "$ref" in node:
                return inline(definitions[node["$ref"].rsplit("/", 1)[-1]])
            return {key: inline(value) for key, value in node.items()}
        if isinstance(node, list):
            return [inline(value) for value in node]
        return node

    return inline(schema)


def body_of(model: type[DtoT]) -> Callable[..., Awaitable[DtoT]]:
    """FastAPI dependency validating the request body as ``model``."""

    async def validated_body(
        payload: Any = Body(..., title=model.__name__, json_schema_extra=request_schema(model)),
    ) -> DtoT:
        return validate(model, payload)

    return validated_body


def violations_from_errors(
    model: type[Dto], errors: Sequence[ErrorDetails]
) -> list[FieldViolation]:
    violations = []
    for error in errors:
        loc = tuple(error["loc"])
        field = ".".join(str(part) for part in loc) or "body"
        message = _message_for(model, loc, error) or error["msg"]
        violations.append(FieldViolation(field=field, message=message))
    return violations


def _constraint_kind(error: ErrorDetails) -> str | None:
    error_type = error["type"]
    if error_type in ("missing", "string_too_short", "string_blank"):
        return "required"
    if error.get("input") is None and error_type.endswith(("_type", "_parsing")):
        return "required"
    if error_type == "string_too_long":
        return "max_length"
    if error_type in _RANGE_ERRORS:
        return "range"
    return None


def _field_name(model: type[Dto], key: str | int) -> str | None:
    for name, info in model.model_fields.items():
        if key in (name, info.alias, to_camel(name)):
            return name
    return None


def _message_for(model: type[Dto], loc: tuple, error: ErrorDetails) -> str | None:
    kind = _constraint_kind(error)
    if kind is None or not loc:
        return None

    owner: Any = model
    for part in loc[:-1]:
        name = _field_name(owner, part)
        if name is None:
            return None
        owner = owner.model_fields[name].annotation
        if not (isinstance(owner, type) and issubclass(owner, Dto)):
            return None

    name = _field_name(owner, loc[-1])
    if name is None:
        return None
    return owner.messages.get(name, {}).get(kind)
