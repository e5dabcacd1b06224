# airport_ops/main.py

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.engine import make_url
from starlette.exceptions import HTTPException as StarletteHTTPException

from airport_ops.config import (
    MEMORY_DATABASE_URL, configure_logging, get_cors_origins, get_database_url, seed_sample_data_enabled,
)
from airport_ops.database import make_engine, make_session_factory, init_db
from airport_ops.errors import ValidationError, format_request_errors
from airport_ops.seed import seed_sample_data
from airport_ops.storage.base import Storage
from airport_ops.storage.memory import MemStorage
from airport_ops.storage.sql import DatabaseStorage

from airport_ops.auth.router import router as auth_router
from airport_ops.flights.router import router as flights_router
from airport_ops.gates.router import router as gates_router
from airport_ops.employees.router import router as employees_router
from airport_ops.passengers.router import router as passengers_router
from airport_ops.stats.router import router as stats_router
from airport_ops.pages.router import router as pages_router

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


def build_storage(database_url: str) -> Storage:
    if database_url == MEMORY_DATABASE_URL:
        logger.info("Using in-memory storage with sample data")
        storage = MemStorage()
        seed_sample_data(storage)
        return storage

    logger.info(f"Using database {make_url(database_url).render_as_string(hide_password=True)}")
    engine = make_engine(database_url)
    init_db(engine)
    storage = DatabaseStorage(make_session_factory(engine))
    if seed_sample_data_enabled():
        seed_sample_data(storage)
    return storage


def register_error_handlers(app: FastAPI):

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={
            "message": "Validation error",
            "errors": format_request_errors(exc.errors()),
        })

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"message": "Validation error", "errors": exc.summary()})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail},
                            headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception):
        logger.exception(f"API Error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"message": str(exc) or "An unknown error occurred"})


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """Build the application around one storage object.

    Without an explicit storage the backend comes from DATABASE_URL, which
    must be set.
    """
    configure_logging()
    if storage is None:
        storage = build_storage(get_database_url())

    app = FastAPI(title="Airport Operations Admin")
    app.state.storage = storage

    # 🔓 CORS (permitir el frontend de desarrollo)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    api = APIRouter(prefix="/api")
    api.include_router(auth_router)
    api.include_router(flights_router)
    api.include_router(gates_router)
    api.include_router(employees_router)
    api.include_router(passengers_router)
    api.include_router(stats_router)
    app.include_router(api)

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok"}

    # pages last, their /{resource} route would shadow anything after it
    app.include_router(pages_router)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    return app
