"""
Tasks Router - API endpoints for task management

Handlers are plain `def` functions so FastAPI runs each request in its
worker thread pool; the store does its own locking.

Bodies are decoded from the raw request regardless of Content-Type, and
the {task_id} segment must be a plain integer; both failures are 400.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ...store import Task, TaskStoreBase
from ..dependencies import get_task_id, get_task_store, json_body
from ..schemas import ErrorResponse, TaskCreateRequest, TaskUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Task not found"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid request"}}

# Methods /tasks/{task_id} does not serve; the id is still checked first
_UNSUPPORTED_ITEM_METHODS = ["POST", "PATCH"]
_ALLOWED_ITEM_METHODS = "GET, PUT, DELETE"


def _json_request_body(model) -> dict:
    """OpenAPI requestBody for routes that decode the body themselves."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
    openapi_extra=_json_request_body(TaskCreateRequest),
)
def create_task(
    payload: TaskCreateRequest = Depends(json_body(TaskCreateRequest)),
    store: TaskStoreBase = Depends(get_task_store),
):
    """
    Create a new task.

    Request:
        {"title": "Buy groceries", "description": "Milk, bread, vegetables"}

    Response (201):
        {"id": 1, "title": "Buy groceries", "description": "Milk, bread, vegetables", "completed": false}
    """
    task = store.create(payload.title, payload.description)
    logger.info("Task %d created", task.id)
    return task


@router.get("", response_model=List[Task])
def list_tasks(store: TaskStoreBase = Depends(get_task_store)):
    """List all tasks, ordered by ID"""
    return store.list_all()


@router.api_route(
    "/",
    methods=["GET", "PUT", "DELETE", *_UNSUPPORTED_ITEM_METHODS],
    include_in_schema=False,
)
def missing_task_id():
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Task ID not specified")


@router.get("/{task_id}", response_model=Task, responses={**_NOT_FOUND, **_BAD_REQUEST})
def get_task(
    task_id: int = Depends(get_task_id),
    store: TaskStoreBase = Depends(get_task_store),
):
    """Get a single task by ID"""
    return store.get(task_id)


@router.put(
    "/{task_id}",
    response_model=Task,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
    openapi_extra=_json_request_body(TaskUpdateRequest),
)
def update_task(
    task_id: int = Depends(get_task_id),
    payload: TaskUpdateRequest = Depends(json_body(TaskUpdateRequest)),
    store: TaskStoreBase = Depends(get_task_store),
):
    """
    Replace title, description and completed of a task.

    Request:
        {"title": "New title", "description": "New description", "completed": true}

    All three fields are overwritten; there is no partial update.
    """
    task = store.update(task_id, payload.title, payload.description, payload.completed)
    logger.info("Task %d updated (completed=%s)", task.id, task.completed)
    return task


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def delete_task(
    task_id: int = Depends(get_task_id),
    store: TaskStoreBase = Depends(get_task_store),
):
    """Delete a task. Returns 204 with an empty body."""
    store.delete(task_id)
    logger.info("Task %d deleted", task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.api_route("/{task_id}", methods=_UNSUPPORTED_ITEM_METHODS, include_in_schema=False)
def unsupported_item_method(task_id: int = Depends(get_task_id)):
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method Not Allowed",
        headers={"Allow": _ALLOWED_ITEM_METHODS},
    )
