# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Local application imports
from .api.v1 import auth_router, post_router, status_router
from .application.services.post_authorization import warn_on_unchecked_deletes
from .core.config import get_settings
from .domain.exceptions import Forbidden, Unauthenticated
from .infrastructure.db.mongo_connection import close_connection, ensure_indexes, ping_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Pings the MongoDB deployment and builds the unique username index on
    startup. Failures are logged but do not stop the server; requests will
    surface the store error instead.
    """
    try:
        await ping_database()
        logger.info("Pinged your deployment. You successfully connected to MongoDB!")
    except Exception as e:
        logger.error(f"Failed to ping MongoDB: {e}", exc_info=True)

    try:
        await ensure_indexes()
    except Exception as e:
        # Existing duplicate usernames keep the index from being built
        logger.error(f"Failed to create the unique username index: {e}", exc_info=True)

    settings = get_settings()
    warn_on_unchecked_deletes(settings)
    logger.info(f"Server running on {settings.port}")

    yield

    close_connection()
    logger.info("Application shutdown complete")


def register_exception_handlers(application: FastAPI) -> None:
    """Render auth gate failures as bare {"message": ...} bodies"""

    @application.exception_handler(Unauthenticated)
    async def handle_unauthenticated(request: Request, exc: Unauthenticated):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": exc.message},
        )

    @application.exception_handler(Forbidden)
    async def handle_forbidden(request: Request, exc: Forbidden):
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"message": exc.message},
        )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - Auth gate exception handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    application = FastAPI(
        title="Social Backend API",
        version="1.0.0",
        description="Users, posts, likes and comments on MongoDB",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Routes are served from the root path
    application.include_router(status_router)
    application.include_router(auth_router)
    application.include_router(post_router)

    return application


# Create application instance
app = create_application()
