"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from phenomena import __version__
from phenomena.config import get_settings
from phenomena.database import create_engine, create_session_factory, init_db

# Import routers
from phenomena.routers import health, reports

# Import middleware
from phenomena.middleware import logging_middleware, register_exception_handlers
from phenomena.utils.logger import configure_logging, get_logger

settings = get_settings()

# Configure logging early
configure_logging(log_level=settings.log_level, debug=settings.debug)
log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database engine for the app's lifetime and dispose it on shutdown."""
    log.info("starting application", debug=settings.debug, log_level=settings.log_level)

    engine = create_engine(settings)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    await init_db(engine)
    log.info("database initialized")

    yield

    log.info("shutting down application")
    await engine.dispose()
    log.info("database connections closed")


app = FastAPI(
    title="Phenomena API",
    description="Report incidents, discuss them for a limited time, close them with a shared secret",
    version=__version__,
    lifespan=lifespan,
)

# Register exception handlers first
register_exception_handlers(app)

_cors_origins = settings.get_cors_origins_list()
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins or ["*"],
    allow_credentials=bool(_cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request logging middleware
app.middleware("http")(logging_middleware)

# Register routers
app.include_router(health.router, prefix=settings.api_prefix, tags=["Health"])
app.include_router(reports.router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Phenomena API",
        "version": __version__,
        "endpoints": {
            "health": f"{settings.api_prefix}/health",
            "reports": f"{settings.api_prefix}/reports",
            "comments": f"{settings.api_prefix}/reports/{{report_id}}/comments",
        },
        "docs": "/docs",
    }


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "phenomena.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
