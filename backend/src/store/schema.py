"""
Task record definitions for the in-memory store.

The same model is used as the HTTP response body, so the field names
match the JSON shape served by the web layer.
"""

from pydantic import BaseModel, Field


class Task(BaseModel):
    """A single task record."""
    id: int = Field(..., ge=1)  # Assigned by the store, never reused
    title: str
    description: str
    completed: bool = False
