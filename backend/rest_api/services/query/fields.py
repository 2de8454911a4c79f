"""
Static per-entity field tables.

Each entity declares which of its columns can be filtered, sorted,
searched and patched, together with the Python type used to convert
incoming string values. Name lookup is exact first, then case- and
separator-insensitive, so ``PriceListId``, ``priceListId`` and
``price_list_id`` resolve to the same field.

Usage:
    table = FieldTable("PriceList", [
        FieldSpec("id", PriceList.id, UUID, patchable=False),
        FieldSpec("name", PriceList.name, str, searchable=True),
    ])
    spec = table.resolve("Name")
    value = spec.convert("Retail")
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Iterable, Iterator

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import InstrumentedAttribute

from shared.utils.exceptions import ValidationError
from shared.utils.validators import normalize_field_name


@lru_cache(maxsize=None)
def _adapter(python_type: type) -> TypeAdapter:
    return TypeAdapter(python_type)


@dataclass(frozen=True, eq=False)
class FieldSpec:
    """One readable field of an entity. Compared by identity."""

    name: str
    column: InstrumentedAttribute
    python_type: type
    searchable: bool = False
    patchable: bool = True
    nullable: bool = False

    def convert(self, raw: Any) -> Any:
        """
        Convert a wire value to this field's type.

        Raises:
            ValidationError: Value is not representable as the field type
        """
        if raw is None:
            if not self.nullable:
                raise ValidationError(f"Property '{self.name}' cannot be null", field=self.name)
            return None
        try:
            return _adapter(self.python_type).validate_python(raw)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Value '{raw}' is not valid for property '{self.name}' "
                f"of type {self.python_type.__name__}",
                field=self.name,
            ) from e


class FieldTable:
    """Name-indexed collection of an entity's fields."""

    def __init__(self, entity_name: str, fields: Iterable[FieldSpec], primary_key: str = "id"):
        self.entity_name = entity_name
        self._fields = tuple(fields)
        self._by_name = {f.name: f for f in self._fields}
        self._by_key = {normalize_field_name(f.name): f for f in self._fields}
        self._primary_key = self._by_name[primary_key]

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self._fields)

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def find(self, name: str) -> FieldSpec | None:
        spec = self._by_name.get(name)
        if spec is None:
            spec = self._by_key.get(normalize_field_name(name))
        return spec

    def resolve(self, name: str) -> FieldSpec:
        """
        Resolve a field by name.

        Raises:
            ValidationError: No such field on the entity
        """
        spec = self.find(name) if name else None
        if spec is None:
            raise ValidationError(
                f"Property '{name}' does not exist on {self.entity_name}",
                field=name,
                entity=self.entity_name,
            )
        return spec

    @property
    def primary_key(self) -> FieldSpec:
        return self._primary_key

    @property
    def searchable(self) -> list[FieldSpec]:
        return [f for f in self._fields if f.searchable]

    @property
    def patchable(self) -> list[FieldSpec]:
        return [f for f in self._fields if f.patchable]
