"""Highlights gallery API. GET /api/fetchHighlights renders the HTML gallery fragment."""

import errno
import logging

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from services.media_library import GameNotFoundError, build_gallery, get_media_root

router = APIRouter(tags=["highlights"])
logger = logging.getLogger(__name__)

_MISSING_ERRNOS = (errno.ENOENT, errno.ENOTDIR)


@router.get("/fetchHighlights", response_class=HTMLResponse)
def fetch_highlights(
    game: str | None = Query(None, description="Game subdirectory; omit for all games"),
) -> Response:
    """Render highlight cards for one game, or for every game under the media root."""
    logger.info("[highlights] GET /api/fetchHighlights called. game=%r", game)
    root = get_media_root()
    try:
        gallery = build_gallery(game, root=root)
    except GameNotFoundError as exc:
        logger.warning("[highlights] game not found: game=%r root=%s", exc.game, root)
        return PlainTextResponse(f"Not Found: {exc}", status_code=404)
    except OSError as exc:
        if isinstance(exc, FileNotFoundError) or exc.errno in _MISSING_ERRNOS:
            logger.error("[highlights] missing path while listing %s: %s", root, exc)
            return PlainTextResponse(
                "Not Found: The specified game directory was not found "
                f"or there are no game directories in '{root.name}'.",
                status_code=404,
            )
        logger.exception("[highlights] error fetching highlights from %s", root)
        return PlainTextResponse(
            f"Internal Server Error: Could not retrieve highlights. Error: {exc}",
            status_code=500,
        )

    logger.info("[highlights] GET /api/fetchHighlights → 200 cards=%d", gallery.card_count)
    return HTMLResponse(gallery.body, status_code=200)
