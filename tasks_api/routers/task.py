# tasks_api/routers/task.py
import logging
from typing import Any, Optional, Type

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from tasks_api.core.errors import (
    NotFoundError,
    ValidationFailure,
    missing_parameter_message,
)
from tasks_api.schemas.task import TaskCreate, TaskIdParams, TaskUpdate
from tasks_api.services.task_facade import TaskFacade

log = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["Tasks"])

_ERROR_RESPONSE = {
    "content": {
        "application/json": {
            "schema": {
                "type": "object",
                "properties": {"error": {"type": "string"}},
            }
        }
    }
}


def get_task_facade(request: Request) -> TaskFacade:
    return request.app.state.task_facade


def first_error_message(exc: ValidationError) -> str:
    """Message of the first validation error; missing fields read '<field> is required'."""
    err = exc.errors()[0]
    if err["type"] == "missing" and err["loc"]:
        return missing_parameter_message(str(err["loc"][-1]))
    return err["msg"]


def _validate(schema: Type[BaseModel], data: Any) -> dict:
    try:
        model = schema.model_validate(data)
    except ValidationError as e:
        raise ValidationFailure(first_error_message(e))
    return model.model_dump(exclude_unset=True, exclude_none=True)


def validate_payload(
    params: Optional[dict] = None,
    body: Any = None,
    params_schema: Optional[Type[BaseModel]] = None,
    body_schema: Optional[Type[BaseModel]] = None,
) -> dict:
    """Validate path params and body separately, then merge them (params win)."""
    validated_params: dict = {}
    validated_body: dict = {}

    if params_schema is not None:
        validated_params = _validate(params_schema, params or {})

    if body_schema is not None:
        validated_body = _validate(body_schema, {} if body is None else body)

    return {**validated_body, **validated_params}


def _ok(status_code: int, content: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content)


def _error(exc: Exception, not_found: bool = True) -> JSONResponse:
    status_code = 404 if not_found and isinstance(exc, NotFoundError) else 400
    message = exc.message if isinstance(exc, (NotFoundError, ValidationFailure)) else str(exc)
    log.warning("task request failed (%s): %s", status_code, message)
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("", summary="Retrieve all tasks")
async def get_all_tasks(facade: TaskFacade = Depends(get_task_facade)):
    tasks = await facade.get_all()
    return _ok(200, [t.to_json() for t in tasks])


@router.get(
    "/{task_id}",
    summary="Retrieve a task by ID",
    responses={400: _ERROR_RESPONSE, 404: _ERROR_RESPONSE},
)
async def get_task(task_id: str, facade: TaskFacade = Depends(get_task_facade)):
    try:
        payload = validate_payload(params={"id": task_id}, params_schema=TaskIdParams)
        task = await facade.get(payload["id"])
        return _ok(200, task.to_json())
    except Exception as e:
        return _error(e)


@router.post(
    "",
    summary="Create a new task",
    status_code=201,
    responses={400: _ERROR_RESPONSE},
)
async def create_task(
    body: Any = Body(None, examples=[{"title": "My Task", "description": "This is a description of the task"}]),
    facade: TaskFacade = Depends(get_task_facade),
):
    try:
        payload = validate_payload(body=body, body_schema=TaskCreate)
        task = await facade.create(payload)
        return _ok(201, task.to_json())
    except Exception as e:
        # creation never targets an existing id
        return _error(e, not_found=False)


@router.put(
    "/{task_id}",
    summary="Update an existing task",
    responses={400: _ERROR_RESPONSE, 404: _ERROR_RESPONSE},
)
async def update_task(
    task_id: str,
    body: Any = Body(None, examples=[{"title": "Updated Task", "description": "Updated description of the task"}]),
    facade: TaskFacade = Depends(get_task_facade),
):
    try:
        payload = validate_payload(
            params={"id": task_id},
            body=body,
            params_schema=TaskIdParams,
            body_schema=TaskUpdate,
        )
        task = await facade.update(payload)
        return _ok(200, task.to_json())
    except Exception as e:
        return _error(e)


@router.delete(
    "/{task_id}",
    summary="Delete a task by ID",
    responses={400: _ERROR_RESPONSE, 404: _ERROR_RESPONSE},
)
async def delete_task(task_id: str, facade: TaskFacade = Depends(get_task_facade)):
    try:
        payload = validate_payload(params={"id": task_id}, params_schema=TaskIdParams)
        task = await facade.remove(payload["id"])
        return _ok(200, task.to_json())
    except Exception as e:
        return _error(e)
