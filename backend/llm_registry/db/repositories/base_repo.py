"""Shared session handling for the registry repositories."""

from __future__ import annotations

from sqlalchemy.orm import Session


class BaseRepository:
    """Wraps one session; reorder workers commit or roll back through it."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
