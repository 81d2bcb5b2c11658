"""
Web API Schemas - Pydantic models for request/response
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class TaskCreateRequest(BaseModel):
    """Body of POST /tasks."""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, description="Task title")
    description: str = Field(..., min_length=1, description="Task description")


class TaskUpdateRequest(BaseModel):
    """Body of PUT /tasks/{id}. Every field is required; nothing is merged."""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, description="New task title")
    description: str = Field(..., min_length=1, description="New task description")
    completed: StrictBool = Field(..., description="New completion state")


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    detail: str
    errors: Optional[List[FieldError]] = None  # Present on validation failures
