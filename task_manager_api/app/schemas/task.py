"""
Pydantic models for tasks.

A task is a single named entry in the task list.  The store assigns
its identifier on insert; the name is free text.  Input is permissive:
the ``name`` may be missing and scalars are coerced to strings the way
a browser would print them (``true`` → ``"true"``, ``1.0`` → ``"1"``),
but no other checks are applied.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class TaskCreate(BaseModel):
    """Request body for creating a task.

    Unknown fields are ignored.  A missing ``name`` is stored as null.
    """

    name: Optional[str] = Field(None, description="Label of the task")

    model_config = {
        "coerce_numbers_to_str": True,
    }

    @field_validator("name", mode="before")
    @classmethod
    def coerce_scalar_name(cls, v: Any) -> Any:
        # bool must be checked first: it is a subclass of int.
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        return v


class TaskRead(BaseModel):
    """A stored task as returned by the API."""

    id: str
    name: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }
