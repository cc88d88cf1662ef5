# tasks_api/main.py
import logging
from typing import Optional

from dotenv import load_dotenv

# .env has to be loaded before settings are read
load_dotenv()

from fastapi import FastAPI, Request  # noqa: E402
from fastapi.exceptions import RequestValidationError  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402

from tasks_api.core.config import Settings, settings as default_settings  # noqa: E402
from tasks_api.core.logging_config import setup_logging  # noqa: E402
from tasks_api.middleware.transaction import with_transaction  # noqa: E402
from tasks_api.routers import task  # noqa: E402
from tasks_api.services.task_dao import TaskStore  # noqa: E402
from tasks_api.services.task_facade import TaskFacade  # noqa: E402

logger = logging.getLogger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed JSON bodies: same 400 shape as the handler layer
    return JSONResponse(status_code=400, content={"error": task.first_error_message(exc)})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        description="Task management operations",
    )
    # every app owns its store
    app.state.task_facade = TaskFacade(TaskStore())

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    # registered last so it wraps everything else
    app.middleware("http")(with_transaction)

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(task.router)

    @app.get("/health")
    def health_app(request: Request):
        return {"ok": True, "tasks": len(request.app.state.task_facade.store)}

    logger.info("%s %s ready (env=%s)", settings.app_title, settings.app_version, settings.app_env)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=default_settings.backend_host, port=default_settings.backend_port)


if __name__ == "__main__":
    run()
