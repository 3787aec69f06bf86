from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from app.config import get_settings
from app.database import ProductStore
from app.api import products
from app.api.errors import AVAILABLE_ROUTES, register_exception_handlers

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Every startup gets a freshly seeded store; nothing survives a restart.
    """
    # Startup
    app.state.product_store = ProductStore.with_seed_data()

    logger.info("=" * 50)
    logger.info(f"{settings.APP_NAME} started")
    logger.info(f"Server URL: http://localhost:{settings.PORT}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Initial products: {app.state.product_store.count()}")
    logger.info("Available endpoints:")
    for route in AVAILABLE_ROUTES:
        logger.info(f"  {route}")
    logger.info("=" * 50)

    yield

    # Shutdown
    logger.info("Shutting down application...")
    del app.state.product_store


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="""
    RESTful API for a fashion products catalog.

    - **Product Management**: list, get, create, partial update and delete
    - **Validation**: every id and payload field is checked before the catalog changes
    - **In-memory storage**: the catalog is seeded with five sample products at startup

    ## Errors
    Every error is a JSON object with a `message`. Validation failures (400)
    also name the offending `field` and the `received` value; unknown products
    (404) list the `availableIds`.
    """,
    version=settings.APP_VERSION,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routers
app.include_router(products.router, prefix="/api")


@app.get("/", tags=["Root"])
def root():
    """Root endpoint with API information."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "docs": "/docs",
        "redoc": "/redoc",
        "availableRoutes": AVAILABLE_ROUTES
    }
