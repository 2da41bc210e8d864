import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bundlecheck.api import health_router, ownership_router
from bundlecheck.config import settings
from bundlecheck.models.failure import ApiResponse, KnownError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logging.getLogger("bundlecheck").setLevel("DEBUG" if settings.debug else settings.log_level)
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("bundlecheck"),
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(ownership_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Called from extension content scripts
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    logger.warning("Known failure (%s): %s", exc.kind.value, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(mode="json"),
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected failure: %s", type(exc).__name__)
    return JSONResponse(
        status_code=500,
        content=ApiResponse.unknown_failure(detail=type(exc).__name__).model_dump(mode="json"),
    )
