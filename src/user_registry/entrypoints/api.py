from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_registry.entrypoints.routers import users
from user_registry.services.config import settings


class API(FastAPI):
    def __init__(self) -> None:
        super().__init__(title="User Registry API", debug=bool(settings.DEBUG))

        self.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        @self.get("/health")
        async def health() -> dict[str, str]:
            return {"status": "ok"}


app = API()
app.include_router(users.router, prefix=settings.USER_REGISTRY_URL_PREFIX, tags=["users"])
