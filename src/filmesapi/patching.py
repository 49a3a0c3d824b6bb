"""JSON Patch (RFC 6902) over plain JSON documents.

Documents are the ``dict``/``list``/scalar trees produced by ``json.loads`` or
``model_dump(mode="json")``. Operations are applied in order to a copy of the
document; the first one that cannot be applied raises
:class:`~filmesapi.exceptions.PatchApplicationError` and the input is left
untouched.
"""

import copy
from collections.abc import Iterable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from filmesapi.exceptions import PatchApplicationError
from filmesapi.schemas.base import Dto
from filmesapi.validation import DtoT, validate


class PatchOperation(BaseModel):
    """One entry of a JSON Patch document."""

    model_config = ConfigDict(populate_by_name=True)

    op: Literal["add", "remove", "replace", "move", "copy", "test"]
    path: str
    from_: str | None = Field(default=None, alias="from")
    value: Any = None

    @property
    def has_value(self) -> bool:
        # "value": null is a real value, an absent member is not
        return "value" in self.model_fields_set


def parse_pointer(pointer: str) -> list[str]:
    """Split a JSON Pointer (RFC 6901) into unescaped reference tokens."""
    if pointer == "":
        return []
    if not pointer.startswith("/"):
        raise PatchApplicationError(pointer, f"The path '{pointer}' is not a valid JSON Pointer.")
    return [token.replace("~1", "/").replace("~0", "~") for token in pointer[1:].split("/")]


def apply_patch(
    document: Any,
    operations: Iterable[PatchOperation],
    *,
    strict_members: bool = False,
) -> Any:
    """
    Apply ``operations`` to a deep copy of ``document`` and return the result.

    Args:
        document: JSON document to patch; never mutated
        operations: Patch operations, applied in order
        strict_members: Treat objects as fixed-shape records: member names
            match case-insensitively and ``add`` cannot create new members

    Returns:
        The patched document (a new object, or the new root value)

    Raises:
        PatchApplicationError: If any operation cannot be applied
    """
    patcher = _Patcher(strict_members=strict_members)
    result = copy.deepcopy(document)
    for operation in operations:
        result = patcher.apply(result, operation)
    return result


def patch_dto(dto: DtoT, operations: Iterable[PatchOperation]) -> DtoT:
    """
    Patch a transfer object and validate the result as the same type.

    All operations are applied first; validation then runs once on the
    outcome, so every violated field is reported together.

    Raises:
        PatchApplicationError: If an operation cannot be applied
        ValidationError: If the patched object violates a field constraint
    """
    document = dto.model_dump(mode="json", by_alias=True)
    patched = apply_patch(document, operations, strict_members=True)
    return validate(type(dto), fold_members(type(dto), patched))


def fold_members(model: type[Dto], data: Any) -> Any:
    """
    Rename object members to the field names of ``model``, ignoring case.

    Objects written by ``add`` or ``replace`` carry whatever member casing the
    client sent; nested transfer objects are folded recursively. Members that
    match no field are left as they are.
    """
    if not isinstance(data, dict):
        return data

    fields = {}
    for name, info in model.model_fields.items():
        alias = info.alias or name
        fields[alias.casefold()] = (alias, info.annotation)

    folded = {}
    for key, value in data.items():
        match = fields.get(key.casefold()) if isinstance(key, str) else None
        if match is None:
            folded[key] = value
            continue
        alias, annotation = match
        if isinstance(annotation, type) and issubclass(annotation, Dto):
            value = fold_members(annotation, value)
        folded[alias] = value
    return folded


class _Patcher:
    def __init__(self, strict_members: bool):
        self.strict_members = strict_members

    def apply(self, document: Any, operation: PatchOperation) -> Any:
        op = operation.op
        path = operation.path

        if op in ("add", "replace", "test") and not operation.has_value:
            raise PatchApplicationError(path, f"The '{op}' operation requires a value.")
        if op in ("move", "copy") and operation.from_ is None:
            raise PatchApplicationError(path, f"The '{op}' operation requires a 'from' path.")

        if op == "add":
            return self.add(document, path, operation.value)
        if op == "remove":
            document, _ = self.remove(document, path)
            return document
        if op == "replace":
            return self.replace(document, path, operation.value)
        if op == "move":
            return self.move(document, operation.from_, path)
        if op == "copy":
            value = copy.deepcopy(self.resolve(document, parse_pointer(operation.from_), operation.from_))
            return self.add(document, path, value)
        self.test(document, path, operation.value)
        return document

    # -- operations --------------------------------------------------------

    def add(self, document: Any, path: str, value: Any) -> Any:
        tokens = parse_pointer(path)
        if not tokens:
            return value
        parent = self.resolve(document, tokens[:-1], path)
        last = tokens[-1]
        if isinstance(parent, dict):
            parent[self.member(parent, last, path, creating=True)] = value
        elif isinstance(parent, list):
            parent.insert(self.index(parent, last, path, creating=True), value)
        else:
            raise self.not_found(path, last)
        return document

    def remove(self, document: Any, path: str) -> tuple[Any, Any]:
        tokens = parse_pointer(path)
        if not tokens:
            raise PatchApplicationError(path, "The document root cannot be removed.")
        parent = self.resolve(document, tokens[:-1], path)
        last = tokens[-1]
        if isinstance(parent, dict):
            removed = parent.pop(self.member(parent, last, path))
        elif isinstance(parent, list):
            removed = parent.pop(self.index(parent, last, path))
        else:
            raise self.not_found(path, last)
        return document, removed

    def replace(self, document: Any, path: str, value: Any) -> Any:
        tokens = parse_pointer(path)
        if not tokens:
            return value
        parent = self.resolve(document, tokens[:-1], path)
        last = tokens[-1]
        if isinstance(parent, dict):
            parent[self.member(parent, last, path)] = value
        elif isinstance(parent, list):
            parent[self.index(parent, last, path)] = value
        else:
            raise self.not_found(path, last)
        return document

    def move(self, document: Any, from_path: str, path: str) -> Any:
        if from_path == path:
            return document
        if path.startswith(from_path + "/"):
            raise PatchApplicationError(path, f"The path '{from_path}' cannot be moved into one of its children.")
        document, value = self.remove(document, from_path)
        return self.add(document, path, value)

    def test(self, document: Any, path: str, expected: Any) -> None:
        actual = self.resolve(document, parse_pointer(path), path)
        if not _json_equal(actual, expected):
            raise PatchApplicationError(
                path,
                f"The current value '{actual}' at path '{path}' is not equal to the test value '{expected}'.",
            )

    # -- navigation --------------------------------------------------------

    def resolve(self, document: Any, tokens: list[str], path: str) -> Any:
        current = document
        for token in tokens:
            if isinstance(current, dict):
                current = current[self.member(current, token, path)]
            elif isinstance(current, list):
                current = current[self.index(current, token, path)]
            else:
                raise self.not_found(path, token)
        return current

    def member(self, container: dict, token: str, path: str, creating: bool = False) -> str:
        if token in container:
            return token
        if self.strict_members:
            folded = token.casefold()
            for key in container:
                if isinstance(key, str) and key.casefold() == folded:
                    return key
        elif creating:
            return token
        raise self.not_found(path, token)

    def index(self, array: list, token: str, path: str, creating: bool = False) -> int:
        if creating and token == "-":
            return len(array)
        if not (token.isascii() and token.isdigit()) or (len(token) > 1 and token.startswith("0")):
            raise PatchApplicationError(path, f"The path segment '{token}' is invalid for an array index.")
        index = int(token)
        upper = len(array) if creating else len(array) - 1
        if index > upper:
            raise PatchApplicationError(path, f"The index value provided by path segment '{token}' is out of bounds of the array size.")
        return index

    @staticmethod
    def not_found(path: str, token: str) -> PatchApplicationError:
        return PatchApplicationError(
            path, f"The target location specified by path segment '{token}' was not found."
        )


def _json_equal(left: Any, right: Any) -> bool:
    # bool is an int subclass in Python but a distinct JSON type
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, dict) and isinstance(right, dict):
        return left.keys() == right.keys() and all(_json_equal(left[k], right[k]) for k in left)
    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(_json_equal(a, b) for a, b in zip(left, right))
    if isinstance(left, (dict, list)) or isinstance(right, (dict, list)):
        return False
    return left == right
