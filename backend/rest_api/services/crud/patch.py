"""
Patch documents.

The wire format is a JSON array of ``{"op", "path", "value"}`` objects with
``op`` one of add/replace/remove and ``path`` a single top-level field
(``"/name"``). Operations are resolved against the entity's field table
into a closed set of typed actions before any entity is loaded, so a bad
document never touches storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Sequence, Union

from pydantic import BaseModel

from rest_api.services.query.fields import FieldSpec, FieldTable
from shared.utils.exceptions import ValidationError


class PatchOperation(BaseModel):
    """One operation as received on the wire."""

    op: Literal["add", "replace", "remove"]
    path: str
    value: Any = None


@dataclass(frozen=True)
class SetField:
    field: FieldSpec
    value: Any


@dataclass(frozen=True)
class ClearField:
    field: FieldSpec


PatchAction = Union[SetField, ClearField]


def _resolve_path(table: FieldTable, path: str) -> FieldSpec:
    name = path[1:] if path.startswith("/") else path
    if not name or "/" in name:
        raise ValidationError(f"Invalid patch path '{path}'", path=path)

    spec = table.resolve(name)
    if not spec.patchable:
        raise ValidationError(f"Property '{spec.name}' is read-only", field=spec.name)
    return spec


def resolve_patch(table: FieldTable, document: Sequence[PatchOperation]) -> list[PatchAction]:
    """
    Turn wire operations into typed actions, in order.

    Raises:
        ValidationError: Unknown or read-only path, removal of a required
            field, or a value that does not convert to the field type
    """
    actions: list[PatchAction] = []
    for operation in document:
        spec = _resolve_path(table, operation.path)
        if operation.op == "remove":
            if not spec.nullable:
                raise ValidationError(
                    f"Property '{spec.name}' is required and cannot be removed",
                    field=spec.name,
                )
            actions.append(ClearField(spec))
        else:
            actions.append(SetField(spec, spec.convert(operation.value)))
    return actions


def apply_patch(entity: Any, actions: Sequence[PatchAction]) -> None:
    """Apply resolved actions to an entity in order."""
    for action in actions:
        key = action.field.column.key
        if isinstance(action, SetField):
            setattr(entity, key, action.value)
        else:
            setattr(entity, key, None)
