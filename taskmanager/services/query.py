"""Filter, sort and paginate a user's tasks.

The query is owner-scoped before any other predicate is added; totals and
page slices are both computed by the store against that same query.
"""

import enum
from dataclasses import dataclass
from math import ceil
from typing import List, Optional

from sqlalchemy import asc, case, desc

from taskmanager.models import Task, TaskCategory
from taskmanager.models.task import PRIORITY_RANK, TaskPriority, TaskStatus
from taskmanager.stores import TaskStore

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 100
MAX_LIMIT = 100


class SortField(str, enum.Enum):
    created_at = "createdAt"
    updated_at = "updatedAt"
    title = "title"
    priority = "priority"
    due_date = "dueDate"


class SortOrder(str, enum.Enum):
    asc = "asc"
    desc = "desc"


@dataclass
class TaskQuery:
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    category: Optional[str] = None
    sort_by: SortField = SortField.created_at
    sort_order: SortOrder = SortOrder.desc
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT


@dataclass
class TaskPage:
    tasks: List[Task]
    total: int
    page: int
    total_pages: int


def _sort_keys(sort_by: SortField, sort_order: SortOrder) -> list:
    direction = asc if sort_order == SortOrder.asc else desc
    if sort_by == SortField.priority:
        key = case(PRIORITY_RANK, value=Task.priority, else_=len(PRIORITY_RANK))
        keys = [direction(key)]
    elif sort_by == SortField.due_date:
        # undated tasks go last whichever way the dates run
        keys = [asc(Task.due_date.is_(None)), direction(Task.due_date)]
    else:
        column = {
            SortField.created_at: Task.created_at,
            SortField.updated_at: Task.updated_at,
            SortField.title: Task.title,
        }[sort_by]
        keys = [direction(column)]
    # id tie-break keeps equal keys in a stable order across pages
    keys.append(direction(Task.id))
    return keys


def query_tasks(store: TaskStore, owner_id: int, params: Optional[TaskQuery] = None) -> TaskPage:
    """Return one page of ``owner_id``'s tasks matching ``params``.

    ``page``/``limit`` are expected to be validated by the caller; a page past
    the end yields an empty slice with the full ``total``.
    """
    params = params or TaskQuery()

    query = store.owned_by(owner_id)
    if params.status is not None:
        query = query.filter(Task.status == TaskStatus(params.status).value)
    if params.priority is not None:
        query = query.filter(Task.priority == TaskPriority(params.priority).value)
    if params.category is not None:
        query = query.filter(Task.categories.any(TaskCategory.name == params.category))

    total = query.count()
    skip = (params.page - 1) * params.limit
    tasks = (
        query.order_by(*_sort_keys(SortField(params.sort_by), SortOrder(params.sort_order)))
        .offset(skip)
        .limit(params.limit)
        .all()
    )
    return TaskPage(
        tasks=tasks,
        total=total,
        page=params.page,
        total_pages=ceil(total / params.limit),
    )
