import abc
from typing import Iterable, Optional

from user_registry.domain.base import IDomain


class IRepository(abc.ABC):
    @abc.abstractmethod
    def add(self, data: IDomain) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def get(self, object_id: str) -> Optional[IDomain]:
        raise NotImplementedError

    @abc.abstractmethod
    def list(self) -> Iterable[IDomain]:
        raise NotImplementedError

    @abc.abstractmethod
    def delete(self, data: IDomain) -> None:
        raise NotImplementedError
