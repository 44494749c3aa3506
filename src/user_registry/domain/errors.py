from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NotFound:
    id: str

    @property
    def message(self) -> str:
        return f"cannot find user with id {self.id}"


class UserNotFoundError(LookupError):
    def __init__(self, user_id: str) -> None:
        super().__init__(NotFound(user_id).message)
        self.user_id = user_id


class IdCollisionError(RuntimeError):
    """The id generator returned an id that is already stored."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"generated user id {user_id} is already in use")
        self.user_id = user_id
