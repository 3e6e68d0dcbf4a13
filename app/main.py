# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the ChoreBank API.
# create_app() builds the application from a Settings object: middleware,
# exception handlers, routers, photo serving and API documentation.
#
# Usage:
#   uvicorn app.main:app --reload
#   chorebank-api                     # console script, see run()
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from supabase import Client

from app import VERSION
from app.config import Settings, get_settings
from app.context import AppContext
from app.exceptions import (
    ChoreBankException,
    chorebank_exception_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.routers import health, members, tasks, users

logger = logging.getLogger(__name__)

UPLOADS_URL = "/uploads"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown.
    """
    settings = app.state.context.settings
    logger.info(f"Starting ChoreBank API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down ChoreBank API")


async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "ChoreBank API",
        "version": VERSION,
        "docs": "/swagger",
        "health": "/health",
    }


def create_app(settings: Settings | None = None, db: Client | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration (defaults to the cached environment settings)
        db: Supabase client to use instead of creating one from settings

    Returns:
        FastAPI: The configured application
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    context = AppContext(settings, db=db)
    context.uploads.ensure_root()

    app = FastAPI(
        title="ChoreBank API",
        description="""
## Household chores and allowances

Parents sign up, log in, and manage **tasks** (chores) and **members**
(household members with a photo and an allowance).

### Authentication

`POST /v1/user/login` returns a bearer token valid for one day.
Send it as `Authorization: Bearer <token>` on every `/v1/user/tasks` and
`/v1/user/members` request.
""",
        version=VERSION,
        docs_url="/swagger",
        redoc_url=None,
        openapi_url="/swagger.json",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Users", "description": "Sign-up, login and token validation"},
            {"name": "Tasks", "description": "Manage the user's tasks"},
            {"name": "Members", "description": "Manage the user's members"},
            {"name": "Health", "description": "API health and readiness checks"},
        ],
    )
    app.state.context = context

    # =========================================================================
    # Middleware
    # =========================================================================

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(ChoreBankException, chorebank_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.add_api_route("/", root, methods=["GET"], tags=["Root"])
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(tasks.router)
    app.include_router(members.router)

    # Uploaded photos, read-only
    app.mount(
        UPLOADS_URL,
        StaticFiles(directory=str(context.uploads.root), check_dir=False),
        name="uploads",
    )

    logger.debug(f"Registered {len(app.routes)} routes")
    return app


def run() -> None:
    """Start the API with uvicorn using the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


app = create_app()
