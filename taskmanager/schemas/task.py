from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import (
    AfterValidator,
    BeforeValidator,
    ConfigDict,
    Field,
    StringConstraints,
    conlist,
    field_serializer,
    model_validator,
)

from taskmanager.models.task import TaskPriority, TaskStatus
from taskmanager.schemas.base import CamelModel, format_utc, to_naive_utc

TITLE_MAX = 200
DESCRIPTION_MAX = 1000
CATEGORY_MAX_ITEMS = 10
CATEGORY_NAME_MAX = 50


def _clean_title(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("title cannot be empty")
    if len(v) > TITLE_MAX:
        raise ValueError(f"title cannot exceed {TITLE_MAX} characters")
    return v


def _clean_description(v: str) -> str:
    v = v.strip()
    if len(v) > DESCRIPTION_MAX:
        raise ValueError(f"description cannot exceed {DESCRIPTION_MAX} characters")
    return v


def _blank_to_none(v):
    if isinstance(v, str) and v.strip() == "":
        return None
    return v


Title = Annotated[str, AfterValidator(_clean_title)]
Description = Annotated[str, AfterValidator(_clean_description)]
Categories = conlist(Annotated[str, StringConstraints(max_length=CATEGORY_NAME_MAX)], max_length=CATEGORY_MAX_ITEMS)
DueDate = Annotated[Optional[datetime], BeforeValidator(_blank_to_none), AfterValidator(to_naive_utc)]


class TaskCreate(CamelModel):
    title: Title
    description: Optional[Description] = ""
    status: TaskStatus = TaskStatus.pending
    priority: TaskPriority = TaskPriority.medium
    category: Categories = Field(default_factory=list)
    due_date: DueDate = None


class TaskUpdate(CamelModel):
    """Patch payload: only the fields present in the request are applied.

    ``dueDate`` may be ``null`` (or ``""``) to clear the deadline; every other
    field rejects an explicit ``null``.
    """

    title: Optional[Title] = None
    description: Optional[Description] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    category: Optional[Categories] = None
    due_date: DueDate = None

    @model_validator(mode="after")
    def no_null_except_due_date(self):
        for name in sorted(self.model_fields_set):
            if name != "due_date" and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class TaskOut(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    category: List[str]
    due_date: Optional[datetime] = None
    owner_id: int
    created_at: datetime
    updated_at: datetime

    @field_serializer("due_date", "created_at", "updated_at")
    def serialize_utc(self, value: Optional[datetime]) -> Optional[str]:
        return format_utc(value)


def task_view(task) -> dict:
    return TaskOut.model_validate(task).model_dump(by_alias=True, mode="json")
