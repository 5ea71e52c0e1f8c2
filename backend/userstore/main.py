"""
Team Board credential store - FastAPI Application

Persists the team's credential collection as a single JSON document.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from userstore.config import get_settings
from userstore.database.connections import get_store, close_store
from userstore.routers import users

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("userstore")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup resolves the data file; shutdown drops the store instance.
    """
    store = get_store()
    logger.info(f"Credential store serving {store.path.resolve()}")
    if not store.path.exists():
        logger.info("No credential file yet, serving an empty collection")

    yield

    close_store()
    logger.info("Credential store stopped")


# Docs routes are disabled: every path other than /users answers 404.
app = FastAPI(
    title="Team Board Credential Store",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(users.router)


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Answer unknown paths and unsupported methods with an empty 404."""
    if exc.status_code in (404, 405):
        return Response(status_code=404)
    return await http_exception_handler(request, exc)
