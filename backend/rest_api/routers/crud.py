"""
Generic CRUD router factory.

Every entity exposes the same six endpoints under its own prefix:

    POST   /api/<resource>          -> {"id": ...}
    GET    /api/<resource>          -> [entity, ...]   (X-Total-Count header)
    GET    /api/<resource>/{id}     -> entity or null
    PUT    /api/<resource>/{id}     -> {"status": true}
    PATCH  /api/<resource>/{id}     -> {"status": true}
    DELETE /api/<resource>/{id}     -> {"status": true}

Each endpoint requires the matching entitlement on the resource name.
"""

import uuid
from typing import Callable, Optional

from fastapi import APIRouter, Body, Depends, Query, Response
from sqlalchemy.orm import Session

from rest_api.routers._common.pagination import get_page_request
from rest_api.services.crud import CRUDConfig, CRUDService, PatchOperation
from rest_api.services.query import PageRequest, parse_filters
from shared.config.constants import Entitlement, SortOrder
from shared.infrastructure.db import get_db
from shared.security.auth import require_entitlement
from shared.utils.schemas import CreatedResponse, ErrorResponse, StatusResponse

TOTAL_COUNT_HEADER = "X-Total-Count"

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    401: {"model": ErrorResponse, "description": "Missing or insufficient entitlement"},
    404: {"model": ErrorResponse, "description": "Entity not found"},
    500: {"model": ErrorResponse, "description": "Persistence failure"},
}


def build_crud_router(
    config: CRUDConfig,
    service_factory: Callable[[Session], CRUDService],
    *,
    prefix: str,
    resource: str,
) -> APIRouter:
    """
    Build the router for one entity type.

    Args:
        config: Schemas and entity name of the entity
        service_factory: Builds the entity's service from a session
        prefix: URL prefix, e.g. ``/api/pricelist``
        resource: Resource name checked against the token's entitlements
    """
    router = APIRouter(prefix=prefix, tags=[resource], responses=ERROR_RESPONSES)

    CreateSchema = config.create_schema
    UpdateSchema = config.update_schema
    OutputSchema = config.output_schema

    def get_service(db: Session = Depends(get_db)) -> CRUDService:
        return service_factory(db)

    def entitled(entitlement: Entitlement) -> list:
        return [Depends(require_entitlement(resource, entitlement))]

    @router.post(
        "",
        response_model=CreatedResponse,
        dependencies=entitled(Entitlement.CREATE),
        summary=f"Create {resource}",
    )
    def create_entity(
        body: CreateSchema,
        service: CRUDService = Depends(get_service),
    ) -> CreatedResponse:
        return CreatedResponse(id=service.create(body))

    @router.get(
        "",
        response_model=list[OutputSchema],
        dependencies=entitled(Entitlement.READ),
        summary=f"List {resource}",
    )
    def list_entities(
        response: Response,
        filters: Optional[str] = Query(
            default=None,
            description='JSON array, e.g. [{"PropertyName":"name","Operator":"Contains","Value":"x"}]',
        ),
        search_term: Optional[str] = Query(default=None, alias="searchTerm"),
        page: PageRequest = Depends(get_page_request),
        sort_field: Optional[str] = Query(default=None, alias="sortField"),
        sort_order: Optional[str] = Query(default=SortOrder.ASC.value, alias="sortOrder"),
        service: CRUDService = Depends(get_service),
    ):
        criteria = parse_filters(filters)
        items = service.get(
            criteria,
            search_term,
            page_number=page.page_number,
            page_size=page.page_size,
            sort_field=sort_field,
            sort_order=sort_order,
        )
        response.headers[TOTAL_COUNT_HEADER] = str(service.count(criteria, search_term))
        return items

    @router.get(
        "/{entity_id}",
        response_model=Optional[OutputSchema],
        dependencies=entitled(Entitlement.READ),
        summary=f"Get {resource} by id",
    )
    def get_entity(
        entity_id: uuid.UUID,
        service: CRUDService = Depends(get_service),
    ):
        # A miss is answered with 200 and a null body
        return service.get_by_id(entity_id)

    @router.put(
        "/{entity_id}",
        response_model=StatusResponse,
        dependencies=entitled(Entitlement.UPDATE),
        summary=f"Replace {resource}",
    )
    def update_entity(
        entity_id: uuid.UUID,
        body: UpdateSchema,
        service: CRUDService = Depends(get_service),
    ) -> StatusResponse:
        return StatusResponse(status=service.update(entity_id, body))

    @router.patch(
        "/{entity_id}",
        response_model=StatusResponse,
        dependencies=entitled(Entitlement.UPDATE),
        summary=f"Patch {resource}",
    )
    def patch_entity(
        entity_id: uuid.UUID,
        document: Optional[list[PatchOperation]] = Body(default=None),
        service: CRUDService = Depends(get_service),
    ) -> StatusResponse:
        return StatusResponse(status=service.patch(entity_id, document))

    @router.delete(
        "/{entity_id}",
        response_model=StatusResponse,
        dependencies=entitled(Entitlement.DELETE),
        summary=f"Delete {resource}",
    )
    def delete_entity(
        entity_id: uuid.UUID,
        service: CRUDService = Depends(get_service),
    ) -> StatusResponse:
        return StatusResponse(status=service.delete(entity_id))

    return router
