# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.errors import register_exception_handlers
from .api.v1 import user_router
from .core.config import get_settings
from .core.logging_config import setup_logging
from .di.base_container import BaseContainer
from .di.container import DIContainer
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import MongoConnection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Unless a container was supplied to create_application, opens the MongoDB
    connection, builds the DI container and ensures the unique identity index.
    The connection is closed on shutdown.
    """
    connection: Optional[MongoConnection] = None
    
    if getattr(app.state, "container", None) is None:
        settings = get_settings()
        connection = MongoConnection.from_settings(settings)
        container = DIContainer(connection)
        try:
            await container.get(UserRepository).ensure_indexes()
        except Exception as e:
            logger.error(f"Failed to prepare users collection: {e}", exc_info=True)
            connection.close()
            raise
        app.state.container = container
        logger.info("Connected to DB")
    
    yield
    
    if connection is not None:
        connection.close()
        app.state.container = None
    
    logger.info("Application shutdown complete")


def create_application(container: Optional[BaseContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - CORS middleware configuration
    - Error envelope handlers
    - API route registration
    
    Args:
        container: Pre-built container to use instead of connecting to MongoDB
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    setup_logging(settings.log_level)
    
    application = FastAPI(
        title="User Records API",
        version="1.0.0",
        description="CRUD service for user records stored in MongoDB",
        lifespan=lifespan
    )
    application.state.container = container
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_exception_handlers(application)
    
    application.include_router(user_router)
    
    return application


# Create application instance
app = create_application()
