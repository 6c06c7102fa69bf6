"""
Router factory for admin resources

Every resource gets the same endpoints:

    GET    /            list with pagination and filters, or one record with ?id=
    GET    /{item_id}   one record
    POST   /            create
    PUT    /{item_id}   partial update (PATCH is accepted too)
    PUT    /            partial update, id taken from the query string then the body
    DELETE /{item_id}   delete
    DELETE /            delete, id taken from the query string then the body
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict
import logging

from zelvix.core.database import get_db
from zelvix.core.exceptions import InternalServerException
from zelvix.core.resource import Resource
from zelvix.services.crud_service import CRUDService
from zelvix.utils.dependencies import get_pagination_params, require_admin
from zelvix.utils.pagination import PaginationParams

logger = logging.getLogger(__name__)

async def read_json_body(request: Request) -> Dict[str, Any]:
    """JSON object body, or {} when the body is empty or not an object"""
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}

def _failure(resource: Resource, verb: str, error: Exception) -> InternalServerException:
    logger.exception(f"Failed to {verb} {resource.label.lower()}: {error}")
    return InternalServerException(f"Failed to {verb} {resource.label.lower()}")

async def _target_from_request(service: CRUDService, request: Request):
    """Record addressed by ?id=, a lookup field, or the same keys in the body"""
    resource = service.resource
    query = request.query_params
    if query.get("id") or any(query.get(name) for name in resource.lookup_fields):
        return await service.resolve(query.get("id"), query)

    body = await read_json_body(request)
    record_id = body.get("id")
    for alias in resource.id_aliases:
        if record_id in (None, ""):
            record_id = body.get(alias)
    return await service.resolve(record_id, body)

def build_crud_router(resource: Resource, admin: bool = True) -> APIRouter:
    """Create the CRUD endpoints for one resource"""
    router = APIRouter(dependencies=[Depends(require_admin)] if admin else [])

    def respond(service: CRUDService, key: str, record) -> Dict[str, Any]:
        return {"message": resource.message(key), "data": service.serialize(record)}

    if resource.supports("list"):

        @router.get("")
        async def list_records(
            request: Request,
            pagination: PaginationParams = Depends(get_pagination_params),
            db: AsyncSession = Depends(get_db),
        ):
            try:
                service = CRUDService(db, resource)
                query = request.query_params
                if query.get("id") is not None or any(query.get(name) for name in resource.lookup_fields):
                    record = await service.resolve(query.get("id"), query)
                    return respond(service, "fetched", record)

                items, meta = await service.list(pagination, query)
                return {
                    "message": resource.message("listed"),
                    "data": [service.serialize(item) for item in items],
                    "pagination": meta.to_response(),
                }
            except HTTPException:
                raise
            except Exception as e:
                raise _failure(resource, "fetch", e)

    if resource.supports("get"):

        @router.get("/{item_id}")
        async def get_record(item_id: str, db: AsyncSession = Depends(get_db)):
            try:
                service = CRUDService(db, resource)
                record = await service.get(service.parse_id(item_id))
                return respond(service, "fetched", record)
            except HTTPException:
                raise
            except Exception as e:
                raise _failure(resource, "fetch", e)

    if resource.supports("create"):
        create_schema = resource.create_schema

        @router.post("", status_code=status.HTTP_201_CREATED)
        async def create_record(payload: create_schema, db: AsyncSession = Depends(get_db)):
            try:
                service = CRUDService(db, resource)
                record = await service.create(payload)
                return respond(service, "created", record)
            except HTTPException:
                raise
            except Exception as e:
                raise _failure(resource, "create", e)

    if resource.supports("update"):
        update_schema = resource.update_schema

        @router.put("")
        async def update_record_by_query(
            request: Request,
            payload: update_schema,
            db: AsyncSession = Depends(get_db),
        ):
            try:
                service = CRUDService(db, resource)
                record = await _target_from_request(service, request)
                record = await service.update(record, payload)
                return respond(service, "updated", record)
            except HTTPException:
                raise
            except Exception as e:
                raise _failure(resource, "update", e)

        router.patch("")(update_record_by_query)

        @router.put("/{item_id}")
        async def update_record(
            item_id: str,
            payload: update_schema,
            db: AsyncSession = Depends(get_db),
        ):
            try:
                service = CRUDService(db, resource)
                record = await service.get(service.parse_id(item_id))
                record = await service.update(record, payload)
                return respond(service, "updated", record)
            except HTTPException:
                raise
            except Exception as e:
                raise _failure(resource, "update", e)

        router.patch("/{item_id}")(update_record)

    if resource.supports("delete"):

        @router.delete("")
        async def delete_record_by_query(request: Request, db: AsyncSession = Depends(get_db)):
            try:
                service = CRUDService(db, resource)
                record = await _target_from_request(service, request)
                await service.delete(record)
                return {"message": resource.message("deleted")}
            except HTTPException:
                raise
            except Exception as e:
                raise _failure(resource, "delete", e)

        @router.delete("/{item_id}")
        async def delete_record(item_id: str, db: AsyncSession = Depends(get_db)):
            try:
                service = CRUDService(db, resource)
                record = await service.get(service.parse_id(item_id))
                await service.delete(record)
                return {"message": resource.message("deleted")}
            except HTTPException:
                raise
            except Exception as e:
                raise _failure(resource, "delete", e)

    return router
