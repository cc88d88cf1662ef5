# tasks_api/schemas/task.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TaskIdParams(BaseModel):
    id: int

    model_config = ConfigDict(extra="forbid")


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, examples=["My Task"])
    description: Optional[str] = Field(
        default=None, min_length=1, examples=["This is a description of the task"]
    )

    model_config = ConfigDict(extra="forbid")


class TaskUpdate(BaseModel):
    title: str = Field(..., min_length=1, examples=["Updated Task"])
    description: Optional[str] = Field(
        default=None, min_length=1, examples=["Updated description of the task"]
    )

    model_config = ConfigDict(extra="forbid")
