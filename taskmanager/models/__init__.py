from taskmanager.models.user import User
from taskmanager.models.task import Task, TaskCategory, TaskPriority, TaskStatus

__all__ = ["User", "Task", "TaskCategory", "TaskPriority", "TaskStatus"]
