"""Thin repositories over the SQLAlchemy session.

Only ``TaskStore.owned_by`` builds list queries, and it always starts from the
owner constraint, so a listing can never reach another user's rows.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, Query

from taskmanager.models import Task, User


class DuplicateEmail(Exception):
    pass


class UserStore:
    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def create(self, email: str, password_hash: str) -> User:
        """Insert a user; raises ``DuplicateEmail`` when the unique index trips."""
        user = User(email=email, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateEmail(email) from None
        self.db.refresh(user)
        return user


class TaskStore:
    def __init__(self, db: Session):
        self.db = db

    def get(self, task_id: int) -> Optional[Task]:
        return self.db.get(Task, task_id)

    def owned_by(self, owner_id: int) -> Query:
        return self.db.query(Task).filter(Task.owner_id == owner_id)

    def add(self, task: Task) -> Task:
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        return task

    def save(self, task: Task) -> Task:
        self.db.commit()
        self.db.refresh(task)
        return task

    def delete(self, task: Task) -> None:
        self.db.delete(task)
        self.db.commit()
