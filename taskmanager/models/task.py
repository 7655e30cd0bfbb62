import enum
from typing import List

from sqlalchemy import Column, Integer, String, ForeignKey, Text, DateTime, Index
from sqlalchemy.orm import relationship
from taskmanager.database import Base
from taskmanager.models.base import utcnow


class TaskStatus(str, enum.Enum):
    pending = "pending"
    completed = "completed"


class TaskPriority(str, enum.Enum):
    low = "low"
    medium = "medium"
    high = "high"


# Sort rank for priority; alphabetical order would put "high" first.
PRIORITY_RANK = {TaskPriority.low.value: 0, TaskPriority.medium.value: 1, TaskPriority.high.value: 2}


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    status = Column(String(16), nullable=False, default=TaskStatus.pending.value)
    priority = Column(String(16), nullable=False, default=TaskPriority.medium.value)
    due_date = Column(DateTime, nullable=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    categories = relationship(
        "TaskCategory",
        order_by="TaskCategory.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    __table_args__ = (
        Index("ix_tasks_owner_status", "owner_id", "status"),
        Index("ix_tasks_owner_created", "owner_id", "created_at"),
        Index("ix_tasks_owner_priority", "owner_id", "priority"),
        Index("ix_tasks_owner_due", "owner_id", "due_date"),
    )

    @property
    def category(self) -> List[str]:
        return [c.name for c in self.categories]

    @category.setter
    def category(self, names: List[str]) -> None:
        self.categories = [TaskCategory(name=n, position=i) for i, n in enumerate(names)]


class TaskCategory(Base):
    """One entry of a task's ordered category list."""

    __tablename__ = "task_categories"

    id = Column(Integer, primary_key=True)
    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    name = Column(String(50), nullable=False, index=True)
