"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from devmetrics import __version__
from devmetrics.config import settings
from devmetrics.errors import InvalidConfiguration
from devmetrics.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.devmetrics_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _invalid_configuration_handler(request: Request, exc: InvalidConfiguration) -> JSONResponse:
    logger.warning("Rejected chart configuration on %s: %s", request.url.path, exc)
    body = ErrorResponse(error="invalid_configuration", detail=str(exc))
    return JSONResponse(status_code=422, content=body.model_dump())


def create_app() -> FastAPI:
    app = FastAPI(
        title="devmetrics",
        description="Developer metrics dashboard with semi-donut status charts",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidConfiguration, _invalid_configuration_handler)

    from devmetrics.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
