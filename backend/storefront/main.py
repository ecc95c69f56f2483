"""
Storefront Backend Application.

FastAPI application serving the product catalog, image uploads,
user accounts and shopping carts.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from storefront.api import router as api_router
from storefront.core.config import settings
from storefront.core.database import close_db, init_db
from storefront.core.exceptions import AuthenticationError
from storefront.modules.shop.uploads import IMAGES_PATH, ImageStorage


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Storefront Backend...")

    await init_db()
    logger.info("Database initialized")

    logger.info(f"Storefront Backend started on port {settings.port}")

    yield

    logger.info("Shutting down Storefront Backend...")
    await close_db()
    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Storefront Backend

    ## Features

    - **Catalog**: Products, new collections and popular picks
    - **Uploads**: Product images served from /images
    - **Auth**: Signup and login with JWT session tokens
    - **Cart**: Per-user item quantities
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    default_response_class=ORJSONResponse,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

# Uploaded images; the directory must exist before StaticFiles checks it
app.mount(
    IMAGES_PATH,
    StaticFiles(directory=ImageStorage(settings).ensure_directory()),
    name="images",
)

app.include_router(api_router)


@app.exception_handler(AuthenticationError)
async def authentication_error_handler(
    request: Request, exc: AuthenticationError
) -> ORJSONResponse:
    """Reject requests that cannot be tied to a user."""
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc.message}")
    return ORJSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> ORJSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return ORJSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal server error"},
    )


@app.get("/health", tags=["System"])
async def health_check() -> dict:
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


@app.get("/", tags=["System"], response_class=PlainTextResponse)
async def root() -> str:
    """Liveness message."""
    return "Ecommerce API is running"


def run() -> None:
    """Console entry point."""
    import uvicorn

    uvicorn.run("storefront.main:app", host="0.0.0.0", port=settings.port)
