import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from routes.highlights import router as highlights_router
from services.media_library import get_media_root

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    status: str


def create_app() -> FastAPI:
    """Build the API app; the media root is mounted last so /api and /health take precedence."""
    app = FastAPI(title="Highlights Gallery API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="ok")

    app.include_router(highlights_router, prefix="/api")

    media_root = get_media_root()
    if media_root.is_dir():
        app.mount("/", StaticFiles(directory=media_root, html=True), name="media")
    else:
        logger.warning("[app] media root %s not found; clip playback paths will 404", media_root)
    return app


app = create_app()
