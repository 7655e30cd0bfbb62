import enum
import logging

from taskmanager.models import Task
from taskmanager.models.base import utcnow
from taskmanager.schemas.task import TaskCreate, TaskUpdate
from taskmanager.services.access import get_owned_task
from taskmanager.stores import TaskStore

logger = logging.getLogger(__name__)


def _stored(value):
    return value.value if isinstance(value, enum.Enum) else value


def create_task(store: TaskStore, owner_id: int, data: TaskCreate) -> Task:
    task = Task(
        title=data.title,
        description=data.description or "",
        status=_stored(data.status),
        priority=_stored(data.priority),
        due_date=data.due_date,
        owner_id=owner_id,
    )
    task.category = list(data.category)
    task = store.add(task)
    logger.info("user %s created task %s", owner_id, task.id)
    return task


def get_task(store: TaskStore, task_id: int, user_id: int) -> Task:
    return get_owned_task(store, task_id, user_id, action="access")


def update_task(store: TaskStore, task_id: int, user_id: int, patch: TaskUpdate) -> Task:
    """Apply only the fields present in ``patch``; ``due_date=None`` clears it."""
    task = get_owned_task(store, task_id, user_id, action="update")
    changes = patch.model_dump(exclude_unset=True)
    for name, value in changes.items():
        if name == "category":
            task.category = list(value)
        else:
            setattr(task, name, _stored(value))
    # category edits touch only the child table, so bump the timestamp here
    task.updated_at = utcnow()
    return store.save(task)


def delete_task(store: TaskStore, task_id: int, user_id: int) -> None:
    task = get_owned_task(store, task_id, user_id, action="delete")
    store.delete(task)
    logger.info("user %s deleted task %s", user_id, task_id)
