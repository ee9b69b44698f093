"""
HTTP API
FastAPI application exposing the video pipeline and the single-shot generators.
"""

import logging
import threading
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from . import __version__
from .config import config
from .content import ContentGenerator
from .errors import ContentGenerationError
from .services.providers import Providers
from .video import VideoPipeline, validate_script

logger = logging.getLogger(__name__)

ALLOWED_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


class VideoRequest(BaseModel):
    script: Any = None


class ContentRequest(BaseModel):
    type: Any = None
    params: Optional[dict] = None


class _LazyProviders:
    """Builds Providers from config on first use unless one was injected."""

    def __init__(self, providers: Optional[Providers]) -> None:
        self._providers = providers
        self._lock = threading.Lock()

    def get(self) -> Providers:
        with self._lock:
            if self._providers is None:
                self._providers = Providers.from_config(config)
            return self._providers


def create_app(providers: Optional[Providers] = None) -> FastAPI:
    """Build the API application.

    Args:
        providers: Collaborators to use. Built from config on first request when None.
    """
    app = FastAPI(
        title="contentgen",
        description="Text, image, code and narrated slideshow generation",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=ALLOWED_HEADERS,
    )

    lazy = _LazyProviders(providers)

    @app.exception_handler(ContentGenerationError)
    async def content_generation_error_handler(request: Request, exc: ContentGenerationError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.url.path}")
        return JSONResponse(status_code=500, content={"error": str(exc) or "Unknown error"})

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.post("/generate-video")
    async def generate_video(body: VideoRequest):
        """Generate a narrated slideshow from a script."""
        validate_script(body.script)
        pipeline = VideoPipeline(lazy.get())
        result = await run_in_threadpool(pipeline.run, body.script)
        return result.to_payload()

    @app.post("/generate-content")
    async def generate_content(body: ContentRequest):
        """Generate marketing text, an image or a code snippet."""
        generator = ContentGenerator(lazy.get())
        result = await run_in_threadpool(generator.generate, body.type, body.params)
        return result.to_payload()

    return app
