import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from registrar.core.config import Settings, settings as default_settings
from registrar.core.containers import ApplicationContainer
from registrar.core.errors import register_exception_handlers
from registrar.core.middleware.request_logging import RequestLoggingMiddleware
from registrar.api.endpoints.users import router as users_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    database_manager = app.container.gateways.database_manager()
    await database_manager.create_database()
    yield
    await database_manager.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application; serve with ``uvicorn main:create_app --factory``"""
    settings = settings or default_settings

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

    app.container = ApplicationContainer()
    app.container.config.from_dict(settings.model_dump())

    register_exception_handlers(app)

    # Middleware is executed in reverse order; the last one added runs first
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users_router)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app

