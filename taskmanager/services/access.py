import logging

from taskmanager.models import Task
from taskmanager.stores import TaskStore
from taskmanager.utils.errors import AuthorizationError, NotFoundError

logger = logging.getLogger(__name__)


def get_owned_task(store: TaskStore, task_id: int, user_id: int, action: str = "access") -> Task:
    """Return the task if ``user_id`` owns it.

    Raises ``NotFoundError`` when no such task exists and ``AuthorizationError``
    when it belongs to someone else. Every single-task read, update and delete
    goes through here first.
    """
    task = store.get(task_id)
    if task is None:
        raise NotFoundError("Task")
    if task.owner_id != user_id:
        logger.warning("user %s denied %s on task %s", user_id, action, task_id)
        raise AuthorizationError(f"You do not have permission to {action} this task")
    return task
