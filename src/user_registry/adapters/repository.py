from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from user_registry.domain.user import User

from .base import IRepository


class UserRepository(IRepository):
    def __init__(self, db: Session) -> None:
        self._db = db

    def add(self, data: User) -> None:  # type: ignore[override]
        self._db.add(data)

    def get(self, object_id: str) -> Optional[User]:  # type: ignore[override]
        return self._db.get(User, object_id)

    def list(self) -> List[User]:  # type: ignore[override]
        return self._db.query(User).order_by(User.id.asc()).all()

    def delete(self, data: User) -> None:  # type: ignore[override]
        self._db.delete(data)
