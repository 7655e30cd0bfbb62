from typing import Optional

from fastapi import APIRouter, Depends, Query

from taskmanager.models.task import TaskPriority, TaskStatus
from taskmanager.routers.deps import get_current_user, get_task_store
from taskmanager.schemas.task import TaskCreate, TaskUpdate, task_view
from taskmanager.services import tasks as task_service
from taskmanager.services.query import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    SortField,
    SortOrder,
    TaskQuery,
    query_tasks,
)
from taskmanager.services.tokens import TokenClaims
from taskmanager.stores import TaskStore
from taskmanager.utils.errors import ValidationError

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _parse_int(raw: Optional[str], default: int) -> int:
    """Unparseable paging values fall back to the default instead of failing."""
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _paging(page: Optional[str], limit: Optional[str]):
    page_n = max(_parse_int(page, DEFAULT_PAGE), 1)
    limit_n = min(max(_parse_int(limit, DEFAULT_LIMIT), 1), MAX_LIMIT)
    return page_n, limit_n


def _choice(raw: Optional[str], enum_cls, name: str, default=None):
    """An empty value means "not given"; anything else must be a member."""
    if raw is None or raw.strip() == "":
        return default
    try:
        return enum_cls(raw)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{name} must be one of: {allowed}") from None


@router.post("", status_code=201)
def create_task(
    task: TaskCreate,
    current: TokenClaims = Depends(get_current_user),
    store: TaskStore = Depends(get_task_store),
):
    new = task_service.create_task(store, current.user_id, task)
    return {"success": True, "message": "Task created successfully", "data": {"task": task_view(new)}}


@router.get("")
def list_tasks(
    status: Optional[str] = Query(None, description="pending | completed"),
    priority: Optional[str] = Query(None, description="low | medium | high"),
    category: Optional[str] = None,
    sort_by: Optional[str] = Query(None, alias="sortBy", description="createdAt | updatedAt | title | priority | dueDate"),
    sort_order: Optional[str] = Query(None, alias="sortOrder", description="asc | desc"),
    page: Optional[str] = None,
    limit: Optional[str] = None,
    current: TokenClaims = Depends(get_current_user),
    store: TaskStore = Depends(get_task_store),
):
    page_n, limit_n = _paging(page, limit)
    params = TaskQuery(
        status=_choice(status, TaskStatus, "status"),
        priority=_choice(priority, TaskPriority, "priority"),
        category=category or None,
        sort_by=_choice(sort_by, SortField, "sortBy", SortField.created_at),
        sort_order=_choice(sort_order, SortOrder, "sortOrder", SortOrder.desc),
        page=page_n,
        limit=limit_n,
    )
    result = query_tasks(store, current.user_id, params)
    return {
        "success": True,
        "message": "Tasks fetched successfully",
        "data": {
            "tasks": [task_view(t) for t in result.tasks],
            "total": result.total,
            "page": result.page,
            "totalPages": result.total_pages,
        },
    }


@router.get("/{task_id}")
def get_task(
    task_id: int,
    current: TokenClaims = Depends(get_current_user),
    store: TaskStore = Depends(get_task_store),
):
    task = task_service.get_task(store, task_id, current.user_id)
    return {"success": True, "message": "Task fetched successfully", "data": {"task": task_view(task)}}


@router.put("/{task_id}")
def update_task(
    task_id: int,
    patch: TaskUpdate,
    current: TokenClaims = Depends(get_current_user),
    store: TaskStore = Depends(get_task_store),
):
    task = task_service.update_task(store, task_id, current.user_id, patch)
    return {"success": True, "message": "Task updated successfully", "data": {"task": task_view(task)}}


@router.delete("/{task_id}")
def delete_task(
    task_id: int,
    current: TokenClaims = Depends(get_current_user),
    store: TaskStore = Depends(get_task_store),
):
    task_service.delete_task(store, task_id, current.user_id)
    return {"success": True, "message": "Task deleted successfully"}
