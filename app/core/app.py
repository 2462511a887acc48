import contextlib
import logging

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.deps import create_container
from app.routes import router as api_router
from app.services.exception_handler import register_exception_handlers
from app.settings.app import AppSettings


logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    container: AsyncContainer = app.state.dishka_container
    settings = await container.get(AppSettings)
    logger.info(
        "API endpoint: http://%s:%s/bfhl", settings.host, settings.port
    )
    yield
    await container.close()


def create_app(settings: AppSettings | None = None) -> FastAPI:
    container = create_container()
    settings = settings or AppSettings()
    app = FastAPI(lifespan=lifespan, title=settings.app_name)
    register_exception_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_dishka(container, app=app)
    app.include_router(api_router)
    return app
