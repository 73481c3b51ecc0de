import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.api.routes_todos import router as todos_router
from todo_api.core.config import Settings, get_settings
from todo_api.core.db import Database

logger = logging.getLogger(__name__)

TEXT_REQUIRED = "Text field is required"
INVALID_BODY = "Invalid request body"

# a whole missing body counts as a missing text field
TEXT_REQUIRED_LOCS = {("body",), ("body", "text")}
TEXT_REQUIRED_TYPES = {"missing", "string_too_short"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    db: Database = app.state.db
    # a store that is down at startup is logged, the listener still comes up
    db.connect()
    try:
        yield
    finally:
        db.dispose()


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _validation_message(request: Request, exc: RequestValidationError) -> str:
    if request.method != "POST":
        return INVALID_BODY
    for err in exc.errors():
        loc = tuple(err.get("loc", ()))
        if loc in TEXT_REQUIRED_LOCS and err.get("type") in TEXT_REQUIRED_TYPES:
            return TEXT_REQUIRED
    return INVALID_BODY


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": _validation_message(request, exc)},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="Todo API Service",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = Database(settings.database_url, echo=settings.db_echo)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(todos_router)
    return app
