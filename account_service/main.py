# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import auth_router, user_router, register_exception_handlers
from .core.config import get_settings
from .infrastructure.db.mongo_connection import close_database, ensure_user_indexes, ping_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates the unique indexes on the users collection at startup and closes
    the Mongo client on shutdown.
    """
    try:
        await ensure_user_indexes()
    except Exception as e:
        # Don't fail app startup if MongoDB is unavailable; requests will surface it
        logger.error(f"Failed to ensure user indexes: {e}", exc_info=True)

    yield

    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Error mapping and API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    application = FastAPI(
        title="Account Service API",
        version="1.0.0",
        description="User accounts, credential login and password recovery",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(user_router, prefix="/api/v1/users")

    @application.get("/health", tags=["health"])
    async def health() -> dict:
        database_ok = await ping_database()
        return {"status": "ok", "database": "ok" if database_ok else "unavailable"}

    return application


# Create application instance
app = create_application()
