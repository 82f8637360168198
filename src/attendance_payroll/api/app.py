"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from attendance_payroll import __version__
from attendance_payroll.api.routes import (
    employees_router,
    health_router,
    payroll_router,
    roles_router,
)
from attendance_payroll.calculators.errors import PayrollError
from attendance_payroll.database import create_tables
from attendance_payroll.services.state_machine import InvalidTransitionError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    await create_tables()
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Attendance Payroll API",
        description="Department payroll from attendance records",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # dashboard is served from a different origin
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(PayrollError)
    async def payroll_error_handler(request: Request, exc: PayrollError) -> JSONResponse:
        """Calculation errors are the caller's input problem."""
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc), "code": type(exc).__name__},
        )

    @app.exception_handler(InvalidTransitionError)
    async def transition_error_handler(
        request: Request, exc: InvalidTransitionError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": str(exc), "code": "INVALID_TRANSITION"},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    app.include_router(health_router)
    app.include_router(payroll_router, prefix="/api/v1")
    app.include_router(roles_router, prefix="/api/v1")
    app.include_router(employees_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
