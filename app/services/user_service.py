"""
User persistence service backed by SQLAlchemy.
"""
from __future__ import annotations

from typing import List, Optional

from flask import current_app
from sqlalchemy import select

from app.database import Database
from app.models import User


class UserService:
    """
    Maps each user operation onto a single statement against the store.
    Nothing is cached; every call reads or writes the table directly.
    """

    def __init__(self, database: Database):
        self._database = database

    def list_users(self) -> List[dict]:
        """
        Return every user in the store's natural order.
        """
        with self._database.session() as session:
            rows = session.execute(select(User)).scalars().all()
            return [row.to_dict() for row in rows]

    def create_user(self, name: Optional[str]) -> dict:
        """
        Insert a user and return it with the id the store assigned.
        A missing name is passed through so the NOT NULL constraint decides.
        """
        user = User(name=name)
        with self._database.session() as session:
            session.add(user)
            session.flush()
            # Return the row as stored, not as passed in
            session.refresh(user)
            return user.to_dict()


def get_user_service() -> UserService:
    """Return the UserService bound to the current application."""
    return current_app.extensions["user_service"]
