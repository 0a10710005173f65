"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from takeoff.api.routes import router
from takeoff.models import InvalidArgumentError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain errors onto JSON error responses."""

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(
        request: Request, exc: InvalidArgumentError,
    ) -> JSONResponse:
        logger.info("Rejected %s: %s", request.url.path, exc.message)
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": "invalid_argument",
                "param": exc.param,
            },
        )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Rapid Takeoff",
        description="Wall area, stud framing and material quantity takeoff",
        version="0.1.0",
    )

    # CORS, for a browser front end on another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
