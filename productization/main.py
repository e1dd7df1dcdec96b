import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from productization.core.config import settings
from productization.core.database import SessionLocal, engine
from productization.core.errors import register_error_handlers
from productization.core.tasks import start_refresh_token_cleanup, stop_refresh_token_cleanup
import productization.models  # noqa: F401
from productization.models.base import Base
from productization.repositories.refresh_token_repository import RefreshTokenRepository
from productization.routers import auth as auth_router
from productization.routers import productization as productization_router
from productization.routers import users as users_router

_refresh_repo = RefreshTokenRepository()


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    start_refresh_token_cleanup(
        session_factory=SessionLocal,
        repo=_refresh_repo,
        interval_seconds=settings.refresh_cleanup_interval_seconds,
    )
    try:
        yield
    finally:
        stop_refresh_token_cleanup()


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    application = FastAPI(title="Productization API", lifespan=lifespan)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_credentials=True,
        allow_headers=["Authorization", "Accept", "Content-Type"],
    )
    register_error_handlers(application)
    application.include_router(productization_router.router)
    application.include_router(auth_router.router)
    application.include_router(users_router.router)
    return application


app = create_app()
