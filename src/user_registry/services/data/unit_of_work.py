from __future__ import annotations

import abc
from typing import Callable

from sqlalchemy.orm import Session

from user_registry.adapters.repository import UserRepository


class IUoW(abc.ABC):
    users: UserRepository

    def __enter__(self) -> IUoW:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.rollback()

    @abc.abstractmethod
    def commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def rollback(self) -> None:
        raise NotImplementedError


class UserUoW(IUoW):
    """One database session per ``with`` block.

    Anything not committed before the block exits is rolled back.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self.session_factory = session_factory

    def __enter__(self) -> UserUoW:
        self.session = self.session_factory()
        self.users = UserRepository(self.session)
        return super().__enter__()  # type: ignore[return-value]

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        try:
            super().__exit__(exc_type, exc_value, traceback)
        finally:
            self.session.close()

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
