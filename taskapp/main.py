import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import uvicorn

from taskapp.api.base import api_router
from taskapp.config import AppConfig, load_config
from taskapp.infra.supabase.repositories import open_task_repository
from taskapp.interfaces.task_repository import ITaskRepository

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        force=True
    )


def create_app(
    config: Optional[AppConfig] = None,
    repository_factory: Callable[[AppConfig], ITaskRepository] = open_task_repository,
) -> FastAPI:
    """Build the application.

    The task repository is opened when the app starts and closed when it
    stops. A ConfigurationError raised while opening it aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app_config = config or load_config()
        configure_logging(app_config.log_level)
        repository = repository_factory(app_config)
        app.state.task_repository = repository
        logger.info(f"Serving tasks for namespace {repository.namespace}")
        try:
            yield
        finally:
            app.state.task_repository = None
            repository.close()

    app = FastAPI(
        title="Task API",
        description="Namespaced task tracking backed by Supabase",
        version="1.0.0",
        lifespan=lifespan,
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": "invalid request body"})

    app.include_router(api_router)
    return app


app = create_app()


def main() -> None:
    config = load_config()
    uvicorn.run(create_app(config), host="0.0.0.0", port=config.port)


if __name__ == "__main__":
    main()
