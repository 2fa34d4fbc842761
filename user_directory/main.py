# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import users_router, register_exception_handlers, USERS_ROUTE
from .core.config import get_settings
from .di.container import reset_container
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    The DI container and the Mongo client are built lazily on first use;
    shutdown releases both.
    """
    settings = get_settings()
    logger.info(
        f"User directory starting (repository backend: {settings.user_repository_backend}, "
        f"persist partial updates: {settings.persist_partial_updates})"
    )
    
    yield
    
    close_database()
    reset_container()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Log level for the user_directory package
    - CORS middleware configuration
    - Exception handlers and API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    logging.getLogger("user_directory").setLevel(settings.log_level)
    
    # Create FastAPI app
    application = FastAPI(
        title="User Directory API",
        version="1.0.0",
        description="Create, read, update, patch, delete and page through users",
        lifespan=lifespan
    )
    
    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", "X-Pagination"],
    )
    
    register_exception_handlers(application)
    
    # Register API routers
    application.include_router(users_router, prefix=USERS_ROUTE)
    
    return application


# Create application instance
app = create_application()
