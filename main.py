import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dogsitter.config import get_settings
from dogsitter.interfaces.api.routes import register_routes
from dogsitter.interfaces.api.routes_helpers import CORS_HEADERS
from dogsitter.infrastructure.database import initialize_database, engine


def configure_logging(level: str) -> None:
    """Configure root logging and keep HTTP client chatter out of the logs."""

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup and release the engine on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Dog Sitter functions", lifespan=lifespan)

    # Functions are called by the database webhook and the mobile client.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[CORS_HEADERS["Access-Control-Allow-Origin"]],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=[
            header.strip()
            for header in CORS_HEADERS["Access-Control-Allow-Headers"].split(",")
        ],
    )

    register_routes(app)
    return app


app = create_app()
