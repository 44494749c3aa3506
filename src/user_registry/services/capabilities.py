import abc
import time
from uuid import uuid4


class Clock(abc.ABC):
    @abc.abstractmethod
    def now(self) -> float:
        """Current time as epoch seconds."""
        raise NotImplementedError


class IdGenerator(abc.ABC):
    @abc.abstractmethod
    def next(self) -> str:
        """A fresh id, never returned before."""
        raise NotImplementedError


class SystemClock(Clock):
    def now(self) -> float:
        return time.time()


class UuidGenerator(IdGenerator):
    def next(self) -> str:
        return str(uuid4())
