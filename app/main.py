from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.config import Settings, load_cors_origins
from app.database import Database
from app.exceptions import register_exception_handlers
from app.log import configure_logging
from app.routers import health_router, todo_router

CORS_ALLOW_METHODS = ["GET", "POST", "PATCH", "DELETE", "PUT", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Origin", "Content-Type"]
CORS_EXPOSE_HEADERS = ["Content-Length"]
CORS_MAX_AGE = 12 * 60 * 60


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Bring the database up before serving; any failure here is fatal."""
    database: Database | None = app.state.database
    if database is None:
        settings = Settings.from_env()
        configure_logging(settings.log_level)
        database = Database(settings.database_url, echo=settings.db_echo)
        app.state.database = database

    try:
        await database.connect()
    except Exception:
        logger.exception("Failed to initialize the database")
        await database.dispose()
        raise

    yield

    logger.info("Closing database connections")
    await database.dispose()


def create_app(database: Database | None = None, cors_allow_origins=None) -> FastAPI:
    """
    Build the API. Pass ``database`` to run against a specific datastore
    (tests do); otherwise it is built from the environment at startup.
    """
    app = FastAPI(title="Todo API", lifespan=lifespan)
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_allow_origins or load_cors_origins()),
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
        expose_headers=CORS_EXPOSE_HEADERS,
        allow_credentials=True,
        max_age=CORS_MAX_AGE,
    )
    register_exception_handlers(app)

    app.include_router(health_router.router, tags=["Health"])
    app.include_router(todo_router.router, prefix="/todos", tags=["Todos"])
    return app


app = create_app()


def run() -> None:
    """Console entry point: fails fast when DATABASE_URL is missing."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    database = Database(settings.database_url, echo=settings.db_echo)
    server_app = create_app(database, cors_allow_origins=settings.cors_allow_origins)

    logger.info(f"Starting server on port {settings.port}")
    uvicorn.run(server_app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
