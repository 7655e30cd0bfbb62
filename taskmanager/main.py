import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, UTC
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskmanager import __version__
from taskmanager.config import Settings, settings as default_settings
from taskmanager.database import Base, make_engine, make_session_factory
from taskmanager.logging_setup import setup_logging
from taskmanager.routers import auth, tasks
from taskmanager.services.tokens import TokenService
from taskmanager.utils.errors import AppError

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def _error_body(kind: str, message: str, status_code: int) -> dict:
    return {"error": kind, "message": message, "statusCode": status_code}


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path", "header")]
        msg = err.get("msg", "invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "Validation failed"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.kind, exc.message, exc.status_code),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content=_error_body("ValidationError", _validation_message(exc), 400),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            kind, message = "Not Found", f"Route {request.url.path} not found"
        else:
            kind, message = "HTTPError", str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(kind, message, exc.status_code),
            headers=getattr(exc, "headers", None),
        )

    # Generic error handler; internal detail never reaches the client
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=_error_body("Internal Server Error", "An unexpected error occurred", 500),
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.log_level)

    engine = make_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        Base.metadata.create_all(bind=engine)
        logger.info("database ready")
        yield
        engine.dispose()

    app = FastAPI(
        title="Task Management API",
        version=__version__,
        docs_url=f"{API_PREFIX}/docs",
        openapi_url=f"{API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)
    app.state.token_service = TokenService.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = (time.perf_counter() - start) * 1000
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed)
        return response

    register_error_handlers(app)

    app.include_router(auth.router, prefix=API_PREFIX)
    app.include_router(tasks.router, prefix=API_PREFIX)

    @app.get("/health")
    def health():
        return {"status": "OK", "timestamp": datetime.now(UTC).isoformat()}

    @app.get(API_PREFIX)
    def api_index():
        return {
            "message": "Task Management API",
            "documentation": f"{API_PREFIX}/docs",
            "version": __version__,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=default_settings.port)
