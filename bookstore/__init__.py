# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookstore.logging import logger
from bookstore.middlewares.correlation_id import CorrelationIDMiddleware
from bookstore.middlewares.logging_context import LoggingContextMiddleware
from bookstore.routing import collect_subrouters
from bookstore.settings import app_settings
from bookstore.storage import db
from bookstore.utils.error_handler import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application startup and shutdown.

    Startup waits for the database and optionally creates its tables;
    shutdown releases pooled database connections.
    """
    logger.info("Application startup initiated")
    await db.wait_and_init_db()
    logger.info("Initialized database")

    yield

    logger.info("Application shutdown initiated")
    await db.engine.dispose()
    logger.info("Application shutdown complete")


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    Attaches the startup/shutdown lifespan, includes every router found by
    `bookstore.routing.collect_subrouters()`, installs the error envelope
    handlers and adds the following middleware:
    - `CORSMiddleware`: origins from CORS_ORIGINS.
    - `LoggingContextMiddleware`: request logging with context cleanup.
    - `CorrelationIDMiddleware`: X-Correlation-ID propagation.
    """
    app = FastAPI(
        title="Bookstore API",
        description="CRUD API for authors and their products",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(collect_subrouters())

    register_exception_handlers(app)

    # Middlewares (execute in REVERSE order of registration)
    # Execution flow: CorrelationIDMiddleware → LoggingContextMiddleware → CORSMiddleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    return app


app = application()  # Need for fastapi cli
