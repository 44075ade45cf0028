import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from app.api.deps import engine
from app.api.routers.checkout import router as checkout_router
from app.api.routers.events import router as events_router
from app.api.routers.health import router as health_router
from app.domain.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    PersistenceError,
    PurchaseCancelledError,
    UpstreamError,
    ValidationError,
)
from app.infrastructure.db.tables import metadata

# Configure structured logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# nginx convention for "client closed request"
HTTP_CLIENT_CLOSED_REQUEST = 499

ERROR_STATUS = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (ConflictError, 409),
    (UpstreamError, 502),
    (PersistenceError, 500),
    (PurchaseCancelledError, HTTP_CLIENT_CLOSED_REQUEST),
)


def status_for(exc: DomainError) -> int:
    for error_type, status_code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return 500


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize DB tables (for dev/demo purposes)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    yield
    # Cleanup
    await engine.dispose()

app = FastAPI(
    title="Events Checkout API",
    version="0.1.0",
    lifespan=lifespan
)


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    status_code = status_for(exc)
    log = logger.error if status_code >= 500 else logger.info
    log(
        "Request failed with domain error",
        extra={
            "path": request.url.path,
            "error_code": exc.code,
            "spots": exc.spots,
            "status_code": status_code,
        }
    )
    return PlainTextResponse(
        exc.message,
        status_code=status_code,
        headers={"X-Error-Code": exc.code},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return PlainTextResponse(
        f"Solicitud inválida: {details}",
        status_code=400,
        headers={"X-Error-Code": "INVALID_REQUEST"},
    )


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler to prevent stack trace exposure to clients.
    All unhandled exceptions are logged internally and return a generic error message.
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        }
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "message": "An unexpected error occurred. Please contact support with the error_id if the issue persists."
        }
    )


app.include_router(health_router, tags=["Health"])
app.include_router(events_router, tags=["Events"])
app.include_router(checkout_router, tags=["Checkout"])
