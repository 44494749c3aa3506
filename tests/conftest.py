import pytest

from user_registry.domain.user import UserPayload
from user_registry.services.capabilities import Clock, IdGenerator
from user_registry.services.config import build_engine, build_session_factory
from user_registry.services.data.unit_of_work import UserUoW
from user_registry.services.user_store import UserStore


class StepClock(Clock):
    def __init__(self, start: float = 1_700_000_000.0, step: float = 1.0) -> None:
        self.current = start
        self.step = step

    def now(self) -> float:
        value = self.current
        self.current += self.step
        return value


class SequentialIds(IdGenerator):
    def __init__(self, prefix: str = "user") -> None:
        self.prefix = prefix
        self.counter = 0

    def next(self) -> str:
        self.counter += 1
        return f"{self.prefix}-{self.counter:04d}"


@pytest.fixture
def db_uri(tmp_path):
    return f"sqlite:///{tmp_path / 'users.db'}"


@pytest.fixture
def session_factory(db_uri):
    engine = build_engine(db_uri)
    yield build_session_factory(engine)
    engine.dispose()


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def ids():
    return SequentialIds()


@pytest.fixture
def store(session_factory, clock, ids):
    return UserStore(lambda: UserUoW(session_factory), clock=clock, id_generator=ids)


@pytest.fixture
def payload():
    return UserPayload(pseudo="jdoe", user_name="John Doe", avatar_url="http://x/a.png")
