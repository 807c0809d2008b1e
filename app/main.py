import structlog
from fastapi import FastAPI

from app.api.health import router as health_router
from app.api.todos import router as todos_router
from app.config import Settings, get_settings
from app.errors import register_error_handlers
from app.observability.logging_config import setup_logging
from app.observability.metrics_middleware import MetricsMiddleware
from app.observability.request_logger import RequestLoggerMiddleware
from app.store import TodoStore

log = structlog.get_logger()


def create_app(settings: Settings | None = None, store: TodoStore | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=settings.APP_NAME, version="0.1.0")
    app.state.settings = settings
    app.state.store = store if store is not None else TodoStore()

    # added last runs first: logger sees every request before metrics and routing
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestLoggerMiddleware)

    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(todos_router, prefix=settings.API_PREFIX)
    return app


settings = get_settings()
setup_logging(env=settings.ENV, level=settings.LOG_LEVEL)
app = create_app(settings)


def run():
    import uvicorn

    log.info("starting", app=settings.APP_NAME, host=settings.APP_HOST, port=settings.APP_PORT)
    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    run()
