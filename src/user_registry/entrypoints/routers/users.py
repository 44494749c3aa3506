from __future__ import annotations

from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, status

from user_registry.domain.result import Err, Result
from user_registry.domain.user import User
from user_registry.entrypoints.schemas.user import (
    UserCreateRequest,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)
from user_registry.services.config import build_engine, build_session_factory, settings
from user_registry.services.data.unit_of_work import UserUoW
from user_registry.services.user_store import UserStore

router = APIRouter()


@lru_cache(maxsize=1)
def get_store() -> UserStore:
    engine = build_engine(settings.USER_REGISTRY_DB_URI, echo=settings.USER_REGISTRY_DB_ECHO)
    session_factory = build_session_factory(engine)
    return UserStore(lambda: UserUoW(session_factory))


def _unwrap(result: Result[User]) -> UserResponse:
    if isinstance(result, Err):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.error.message)
    return UserResponse.from_user(result.value)


@router.get("/users", response_model=UserListResponse)
async def list_users(store: UserStore = Depends(get_store)) -> UserListResponse:
    return UserListResponse(users=[UserResponse.from_user(user) for user in store.list()])


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, store: UserStore = Depends(get_store)) -> UserResponse:
    return _unwrap(store.get(user_id))


@router.post("/users", response_model=UserResponse)
async def create_user(
    payload: UserCreateRequest,
    store: UserStore = Depends(get_store),
) -> UserResponse:
    return UserResponse.from_user(store.create(payload.to_payload()))


@router.put("/users/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    payload: UserUpdateRequest,
    store: UserStore = Depends(get_store),
) -> UserResponse:
    return _unwrap(store.update(user_id, payload.to_payload()))


@router.delete("/users/{user_id}", response_model=UserResponse)
async def delete_user(user_id: str, store: UserStore = Depends(get_store)) -> UserResponse:
    return _unwrap(store.delete(user_id))
