"""Course Catalog API - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import get_settings
from app.core.error_handlers import register_error_handlers
from app.core.observability import setup_logging
from app.db.base import Base
from app.db.session import engine
from app.routers import courses, users

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("%s started", settings.app_name)

    yield

    await engine.dispose()
    logger.info("%s shutting down", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="Users and courses, with Basic auth on every write",
    lifespan=lifespan,
)

register_error_handlers(app)

app.include_router(users.router, prefix=settings.api_prefix)
app.include_router(courses.router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    return {"message": "Welcome to the Course Catalog API!"}


@app.get("/health")
async def health():
    return {"status": "ok"}
