"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.models.responses import ErrorCodes, ErrorResponse
from api.request_log import RequestLog, current_request_log, get_client_ip, log_request
from api.routes import calendar_router, events_router, health_router
from core.config import API_DEBUG, API_VERSION, LOG_LEVEL, SEED_DEMO_EVENT
from services.controller import CalendarController, seed_demo_event

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Tests may install their own controller before startup
    if not hasattr(app.state, "controller"):
        app.state.controller = CalendarController()
    if SEED_DEMO_EVENT:
        event = seed_demo_event(app.state.controller)
        logger.info("Seeded demo event %s", event.id)

    yield


app = FastAPI(
    title="Month Calendar API",
    description="Month-view calendar layout with multi-day event bars",
    version=API_VERSION,
    debug=API_DEBUG,
    lifespan=lifespan,
)

# CORS middleware (for development)
if API_DEBUG:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def request_logging(request: Request, call_next):
    """Time every request and log a one-line summary."""
    start_time = time.time()
    request_log = RequestLog(
        endpoint=request.url.path,
        method=request.method,
        client_ip=get_client_ip(request),
        status_code=500,
    )
    request.state.request_log = request_log
    try:
        response = await call_next(request)
        request_log.status_code = response.status_code
        return response
    finally:
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        log_request(request_log)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed path, query or body values."""
    details = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    request_log = current_request_log(request)
    if request_log is not None:
        request_log.error_code = ErrorCodes.INVALID_REQUEST
        request_log.error_message = "Invalid request"
        request_log.details.extend(("invalid_request", d) for d in details)

    return JSONResponse(
        status_code=400,
        content={
            "detail": ErrorResponse(
                error="Invalid request",
                code=ErrorCodes.INVALID_REQUEST,
                details=details,
            ).model_dump()
        },
    )


# Global exception handler for unexpected errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with standard error format."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal server error",
            code=ErrorCodes.INTERNAL_ERROR,
            details=[],
        ).model_dump(),
    )


# Include routers
app.include_router(health_router)
app.include_router(calendar_router)
app.include_router(events_router)


# Entry point for uvicorn
if __name__ == "__main__":
    import uvicorn

    from core.config import API_HOST, API_PORT

    uvicorn.run(
        "api.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_DEBUG,
    )
