"""
Request dependencies shared by routers.
"""

from typing import Annotated, Callable, Type, TypeVar

from fastapi import Path, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from ..store import TaskStoreBase

ModelT = TypeVar("ModelT", bound=BaseModel)

# Optional sign and digits only; "1.0", " 1" and "" are not IDs
TASK_ID_PATTERN = r"^[+-]?[0-9]+$"


def get_task_store(request: Request) -> TaskStoreBase:
    """
    Return the task store owned by the running application.

    The store is created once in create_app() and kept on app.state,
    so every request of one app sees the same table.
    """
    return request.app.state.task_store


def get_task_id(task_id: Annotated[str, Path(pattern=TASK_ID_PATTERN)]) -> int:
    """Parse the {task_id} path segment as a strict decimal integer."""
    return int(task_id)


def json_body(model: Type[ModelT]) -> Callable:
    """
    Build a dependency that decodes the raw request body as JSON into `model`.

    The Content-Type header is ignored, so clients posting JSON as
    form-urlencoded (or with no header) are still understood. Decode and
    schema failures surface as RequestValidationError, which the app maps
    to 400.
    """

    async def dependency(request: Request) -> ModelT:
        raw = await request.body()
        try:
            return model.model_validate_json(raw)
        except ValidationError as exc:
            errors = [{**error, "loc": ("body", *error["loc"])} for error in exc.errors()]
            raise RequestValidationError(errors) from exc

    return dependency
