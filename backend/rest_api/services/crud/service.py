"""
Generic entity service.

One CRUDService per entity type, configured by CRUDConfig. Composes the
query pipeline (filters, search, sort, pagination) with create, update,
patch and delete against a single SQLAlchemy session.

Usage:
    from rest_api.services.domain import PriceListService

    service = PriceListService(db)
    new_id = service.create(PriceListCreate(...))
    rows = service.get(filters, "retail", page_number=1, page_size=10,
                       sort_field="name", sort_order="asc")
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Generic, Sequence, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rest_api.models import Base
from rest_api.services.query import (
    FieldTable,
    FilterCriteria,
    PageRequest,
    apply_filters,
    apply_sort,
)
from shared.config.constants import Limits, SortOrder
from shared.config.logging import get_logger
from shared.infrastructure.db import safe_commit
from shared.utils.exceptions import DatabaseError, NotFoundError, ValidationError

from .patch import PatchOperation, apply_patch, resolve_patch

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
OutputT = TypeVar("OutputT", bound=BaseModel)
CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)


@dataclass(frozen=True)
class CRUDConfig(Generic[ModelT, OutputT, CreateT, UpdateT]):
    """Per-entity wiring for CRUDService and build_crud_router."""

    model: Type[ModelT]
    output_schema: Type[OutputT]
    create_schema: Type[CreateT]
    update_schema: Type[UpdateT]
    entity_name: str
    fields: FieldTable
    # Loader options (e.g. joinedload of a parent) for reads
    load_options: tuple[Any, ...] = ()


class CRUDService(Generic[ModelT, OutputT, CreateT, UpdateT]):
    """
    Create/read/update/patch/delete for one entity type.

    Every mutating method commits exactly once. Persistence failures are
    rolled back and raised as DatabaseError.
    """

    def __init__(self, db: Session, config: CRUDConfig[ModelT, OutputT, CreateT, UpdateT]):
        self._db = db
        self._config = config
        self._model = config.model
        self._fields = config.fields
        self._entity_name = config.entity_name

    @property
    def db(self) -> Session:
        return self._db

    @property
    def config(self) -> CRUDConfig[ModelT, OutputT, CreateT, UpdateT]:
        return self._config

    @property
    def entity_name(self) -> str:
        return self._entity_name

    # =========================================================================
    # Query Methods
    # =========================================================================

    def get_by_id(self, entity_id: uuid.UUID) -> ModelT | None:
        return self._db.get(self._model, entity_id, options=self._config.load_options)

    def get(
        self,
        filters: Sequence[FilterCriteria] | None = None,
        search_term: str | None = None,
        page_number: int = Limits.DEFAULT_PAGE_NUMBER,
        page_size: int = Limits.DEFAULT_PAGE_SIZE,
        sort_field: str | None = None,
        sort_order: str | SortOrder | None = None,
    ) -> list[ModelT]:
        """
        List entities matching filters and search, sorted and paged.

        Raises:
            ValidationError: Bad page bounds (checked before anything else),
                unknown property, bad operator or value, bad sort order
        """
        page = PageRequest(page_number=page_number, page_size=page_size)

        stmt = self._filtered(filters, search_term)
        stmt = apply_sort(stmt, self._fields, sort_field, sort_order)
        stmt = page.apply(stmt).options(*self._config.load_options)

        return list(self._db.scalars(stmt).all())

    def count(
        self,
        filters: Sequence[FilterCriteria] | None = None,
        search_term: str | None = None,
    ) -> int:
        """Number of entities matching filters and search, ignoring paging."""
        stmt = self._filtered(filters, search_term)
        return self._db.scalar(select(func.count()).select_from(stmt.subquery())) or 0

    # =========================================================================
    # Command Methods
    # =========================================================================

    def create(self, data: CreateT) -> uuid.UUID:
        """Persist a new entity and return its freshly assigned id."""
        entity = self._model(**data.model_dump(exclude={"id"}))
        entity.id = uuid.uuid4()

        self._db.add(entity)
        self._commit("create")

        logger.info("Entity created", entity=self._entity_name, entity_id=str(entity.id))
        return entity.id

    def update(self, entity_id: uuid.UUID, data: UpdateT) -> bool:
        """
        Replace every mutable field of an existing entity.

        Raises:
            ValidationError: ``data.id`` differs from ``entity_id``
            NotFoundError: No entity with ``entity_id``
        """
        if data.id != entity_id:
            raise ValidationError(
                "Mismatched Id",
                entity=self._entity_name,
                path_id=str(entity_id),
                body_id=str(data.id),
            )

        entity = self._require(entity_id)
        for key, value in data.model_dump(exclude={"id"}).items():
            setattr(entity, key, value)

        self._commit("update")

        logger.info("Entity updated", entity=self._entity_name, entity_id=str(entity_id))
        return True

    def patch(self, entity_id: uuid.UUID, document: Sequence[PatchOperation] | None) -> bool:
        """
        Apply a patch document to an existing entity.

        The document is resolved before the entity is loaded; the patched
        state must still satisfy the update schema.

        Raises:
            ValidationError: Missing document, bad operation, or invalid
                resulting state
            NotFoundError: No entity with ``entity_id``
        """
        if document is None:
            raise ValidationError("Patch document is missing.", entity=self._entity_name)

        actions = resolve_patch(self._fields, document)
        entity = self._require(entity_id)

        apply_patch(entity, actions)
        self._check_state(entity)
        self._commit("patch")

        logger.info(
            "Entity patched",
            entity=self._entity_name,
            entity_id=str(entity_id),
            operations=len(actions),
        )
        return True

    def delete(self, entity_id: uuid.UUID) -> bool:
        """
        Hard-delete an entity.

        Raises:
            NotFoundError: No entity with ``entity_id``
        """
        entity = self._require(entity_id)
        self._db.delete(entity)
        self._commit("delete")

        logger.info("Entity deleted", entity=self._entity_name, entity_id=str(entity_id))
        return True

    # =========================================================================
    # Helpers
    # =========================================================================

    def _filtered(
        self,
        filters: Sequence[FilterCriteria] | None,
        search_term: str | None,
    ) -> Select:
        return apply_filters(select(self._model), self._fields, filters, search_term)

    def _require(self, entity_id: uuid.UUID) -> ModelT:
        entity = self.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self._entity_name, entity_id)
        return entity

    def _check_state(self, entity: ModelT) -> None:
        try:
            self._config.update_schema.model_validate(entity, from_attributes=True)
        except PydanticValidationError as e:
            self._db.rollback()
            first = e.errors()[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            message = first.get("msg", "invalid value")
            detail = f"Patched {self._entity_name} is invalid: {location or 'entity'}: {message}"
            raise ValidationError(detail, entity=self._entity_name) from e

    def _commit(self, operation: str) -> None:
        try:
            safe_commit(self._db)
        except SQLAlchemyError as e:
            raise DatabaseError(
                f"{operation} {self._entity_name}",
                entity=self._entity_name,
                error=str(e.__class__.__name__),
            ) from e
