from contextlib import asynccontextmanager

from fastapi import FastAPI

from api import names
from core.config import settings
from core.errors import register_error_handlers
from core.logging import configure_logging, get_logger
from core.middleware import RequestLoggingMiddleware
from engines.inflection import get_inflector

# Initialize logging before anything else
configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("startup", message="Name declension API starting up")

    # Fail fast on a missing or broken rules file
    inflector = get_inflector()
    log.info("rules_ready", source=inflector.rules.source)

    yield

    log.info("shutdown", message="Name declension API shutting down")


app = FastAPI(
    title="FIO Declension API",
    description="Declension of Russian last names, first names and patronymics across the six grammatical cases",
    version="0.1.0",
    lifespan=lifespan,
)

register_error_handlers(app)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(names.router, prefix="/api/names", tags=["names"])


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": "0.1.0"}


if __name__ == "__main__":
    import uvicorn

    log.info("server_config", host=settings.BACKEND_HOST, port=settings.BACKEND_PORT, debug=settings.APP_DEBUG)
    uvicorn.run(
        "main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.APP_DEBUG,
        log_config=None,  # Disable uvicorn's default logging, we handle it
    )
