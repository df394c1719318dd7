import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from riskengine.adapter.services.database import Database
from riskengine.domain.errors import assignment_not_found, risk_not_found
from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


_NOT_FOUND_BY_PATH_PARAM = {
    "risk_id": risk_not_found,
    "assignment_id": assignment_not_found,
}


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()

    # A malformed id in the path cannot name a stored record
    for err in errors:
        loc = err["loc"]
        if len(loc) > 1 and loc[0] == "path" and loc[1] in _NOT_FOUND_BY_PATH_PARAM:
            error = _NOT_FOUND_BY_PATH_PARAM[loc[1]]()
            error_dict = {"code": error.code, "message": error.message}
            logger.warning(f"Client error: {error_dict}")
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": error_dict})

    fields = [".".join(str(part) for part in err["loc"] if part != "body") for err in errors]
    error_dict = {
        "code": "VALIDATION_ERROR",
        "message": f"Invalid or missing fields: {', '.join(fields)}",
    }
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": error_dict})


async def handle_storage_error(request: Request, exc: SQLAlchemyError):
    logger.error(f"Storage error on {request.method} {request.url.path}", exc_info=exc)
    error_dict = {"code": "STORAGE_ERROR", "message": "Internal server error"}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_timeout_error(request: Request, exc: TimeoutError):
    logger.warning(f"Request deadline exceeded on {request.method} {request.url.path}")
    error_dict = {"code": "REQUEST_TIMEOUT", "message": "Request took too long, try again later"}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"error": error_dict}
    )


def create_app(ApplicationConfig, database: Optional[Database] = None) -> FastAPI:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if database is None:
        database = Database(
            ApplicationConfig.DB_URI,
            echo=ApplicationConfig.DB_ECHO,
            busy_timeout=ApplicationConfig.DB_BUSY_TIMEOUT_SECONDS,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.AUTO_CREATE_SCHEMA:
            await database.create_all()
        yield
        await database.dispose()

    app = FastAPI(title="Risk Engine API", version="0.1.0", lifespan=lifespan)
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from riskengine.api.routes import assignment, health_check, risk, user

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(risk.router, tags=["Risks"])
    app.include_router(assignment.router, tags=["Assignments"])
    app.include_router(user.router, tags=["Users"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(SQLAlchemyError, handle_storage_error)
    app.add_exception_handler(TimeoutError, handle_timeout_error)

    return app
