import logging
from contextlib import asynccontextmanager
from typing import Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel

from src.domain.result import Error

from .error import ClientError, ServerError
from .middleware import add_request_logging
from .responses import failure

logger = logging.getLogger(__name__)

VALIDATION_FAILED = Error.validation({})
INTERNAL_ERROR = Error("INTERNAL_ERROR", "Internal server error")


async def handle_client_error(request: Request, exc: ClientError):
    error = exc.base_error
    logger.warning("Client error: %s %s", error.code, error.message)
    errors = None
    if exc.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY:
        errors = error.errors
    return JSONResponse(
        status_code=exc.status_code, content=failure(error, errors=errors)
    )


async def handle_server_error(request: Request, exc: ServerError):
    logger.error("Server error: %s", exc.base_error.code)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=failure(exc.base_error, message="Internal server error"),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors: Dict[str, List[str]] = {}
    for item in exc.errors():
        location = [str(part) for part in item.get("loc", ()) if part != "body"]
        field = ".".join(location) or "body"
        errors.setdefault(field, []).append(item.get("msg", "Invalid value."))
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=failure(VALIDATION_FAILED, errors=errors),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=failure(INTERNAL_ERROR),
    )


def create_app(ApplicationConfig) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.AUTO_CREATE_TABLES:
            from src.depends import engine

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        yield

    app = FastAPI(title="Family Recipes API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        add_request_logging(app)

    from src.api.routes import auth, families, health, recipes

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health.router, prefix=prefix, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(families.router, prefix=prefix, tags=["Family"])
    app.include_router(recipes.router, prefix=prefix, tags=["Recipe"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
