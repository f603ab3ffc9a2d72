from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.deps import get_session_manager, get_storage_client
from .api.routers.auth import router as auth_router
from .api.routers.dashboard import router as dashboard_router
from .api.routers.guests import router as guests_router
from .shared.config import get_settings


settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    session_manager = app.dependency_overrides.get(get_session_manager, get_session_manager)()
    await session_manager.initialize()
    try:
        yield
    finally:
        await session_manager.close()
        if get_storage_client.cache_info().currsize:
            await get_storage_client().aclose()


app = FastAPI(title="GuestNama API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allow_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(guests_router)
