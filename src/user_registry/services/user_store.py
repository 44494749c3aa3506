from __future__ import annotations

import logging
import sys
import threading
from typing import Callable, List

from user_registry.domain.errors import IdCollisionError, NotFound
from user_registry.domain.result import Err, Ok, Result
from user_registry.domain.user import User, UserPayload
from user_registry.services.capabilities import Clock, IdGenerator, SystemClock, UuidGenerator
from user_registry.services.data.unit_of_work import IUoW

logging.basicConfig(stream=sys.stdout, level=logging.INFO)
logger = logging.getLogger(__name__)


class UserStore:
    """Durable registry of user accounts keyed by generated id.

    Every operation runs in its own unit of work under the store lock, so a
    lookup and the write that follows it are never interleaved with another
    operation. Returned records are detached copies.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUoW],
        clock: Clock | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._clock = clock or SystemClock()
        self._id_generator = id_generator or UuidGenerator()
        self._lock = threading.RLock()

    def list(self) -> List[User]:
        logger.info("start list_users")
        with self._lock, self._uow_factory() as uow:
            users = [user.copy() for user in uow.users.list()]
        logger.info(f"finish list_users count={len(users)}")
        return users

    def get(self, user_id: str) -> Result[User]:
        logger.info(f"start get_user {user_id=}")
        with self._lock, self._uow_factory() as uow:
            user = uow.users.get(user_id)
            if user is None:
                return self._not_found("get_user", user_id)
            return Ok(user.copy())

    def create(self, payload: UserPayload) -> User:
        logger.info("start create_user")
        with self._lock, self._uow_factory() as uow:
            user_id = self._id_generator.next()
            if uow.users.get(user_id) is not None:
                logger.error(f"id generator returned a stored id {user_id=}")
                raise IdCollisionError(user_id)
            user = User.from_payload(user_id, payload, self._clock.now())
            uow.users.add(user)
            uow.commit()
            created = user.copy()
        logger.info(f"finish create_user {user_id=}")
        return created

    def update(self, user_id: str, payload: UserPayload) -> Result[User]:
        logger.info(f"start update_user {user_id=}")
        with self._lock, self._uow_factory() as uow:
            user = uow.users.get(user_id)
            if user is None:
                return self._not_found("update_user", user_id)
            user.replace(payload, self._clock.now())
            uow.commit()
            updated = user.copy()
        logger.info(f"finish update_user {user_id=}")
        return Ok(updated)

    def delete(self, user_id: str) -> Result[User]:
        logger.info(f"start delete_user {user_id=}")
        with self._lock, self._uow_factory() as uow:
            user = uow.users.get(user_id)
            if user is None:
                return self._not_found("delete_user", user_id)
            removed = user.copy()
            uow.users.delete(user)
            uow.commit()
        logger.info(f"finish delete_user {user_id=}")
        return Ok(removed)

    def _not_found(self, operation: str, user_id: str) -> Err:
        error = NotFound(user_id)
        logger.warning(f"{operation}: {error.message}")
        return Err(error)
