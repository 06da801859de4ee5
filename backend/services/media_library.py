"""Directory listing and gallery assembly over the media root.

The media root holds one subdirectory per game, each holding recorded clips.
Every call re-reads the filesystem; nothing is cached between requests.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from models import HighlightRecord
from services.filename_parser import parse_highlight_filename
from services.renderer import render_gallery_page, render_highlight_card

logger = logging.getLogger(__name__)

DEFAULT_MEDIA_ROOT = "public"
VIDEO_EXTENSION = ".mp4"
ALL_GAMES_TITLE = "All Game Highlights"


class GameNotFoundError(LookupError):
    """Requested game has no directory under the media root."""

    def __init__(self, game: str) -> None:
        super().__init__(f'Directory for game "{game}" does not exist.')
        self.game = game


@dataclass
class Gallery:
    title: str
    card_count: int
    body: str


def get_media_root() -> Path:
    """Media root from HIGHLIGHTS_MEDIA_ROOT, else ./public relative to the working directory."""
    configured = os.environ.get("HIGHLIGHTS_MEDIA_ROOT", "").strip() or DEFAULT_MEDIA_ROOT
    return Path(os.getcwd(), configured)


def _is_plain_segment(game: str) -> bool:
    if game in (".", ".."):
        return False
    return not any(sep in game for sep in ("/", "\\", "\x00"))


def resolve_game_dir(root: Path, game: str) -> Path:
    """
    Map a game name to its directory under root.

    Raises GameNotFoundError when the name is not a single path segment, points
    outside the root, or does not name an existing directory.
    """
    if not _is_plain_segment(game):
        logger.warning("[media] rejected game name %r: not a plain path segment", game)
        raise GameNotFoundError(game)

    game_dir = root / game
    if not _is_inside(game_dir, root):
        logger.warning("[media] rejected game name %r: resolves outside %s", game, root)
        raise GameNotFoundError(game)

    if not game_dir.is_dir():
        raise GameNotFoundError(game)
    return game_dir


def _is_inside(path: Path, root: Path) -> bool:
    try:
        return path.resolve().is_relative_to(root.resolve())
    except OSError:
        return False


def displayable_name(name: str) -> str:
    """Undecodable filename bytes (surrogate escapes) become U+FFFD so the name can be sent as UTF-8."""
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def list_game_names(root: Path) -> list[str]:
    """
    Subdirectory names of root in listing order.

    Plain files are skipped, as are symlinked directories that resolve outside root.
    Names are returned as listed, so they can be joined back onto root.
    """
    with os.scandir(root) as entries:
        return [entry.name for entry in entries if entry.is_dir() and _is_inside(root / entry.name, root)]


def list_video_files(game_dir: Path) -> list[str]:
    """Displayable names in game_dir ending with the video extension, in listing order."""
    return [
        displayable_name(name) for name in os.listdir(game_dir) if name.endswith(VIDEO_EXTENSION)
    ]


def load_highlights(game_dir: Path) -> list[HighlightRecord]:
    return [parse_highlight_filename(name) for name in list_video_files(game_dir)]


def build_gallery(game: str | None, *, root: Path | None = None) -> Gallery:
    """
    Build the gallery for one game, or for every game when game is empty.

    All directory listings finish before any card is rendered. OSError from the
    filesystem propagates untouched; the caller decides the HTTP status.
    """
    root = root if root is not None else get_media_root()

    if game:
        game_dir = resolve_game_dir(root, game)
        listings = [(game, load_highlights(game_dir))]
        title = f"Highlights for {game}"
    else:
        listings = [
            (displayable_name(name), load_highlights(root / name)) for name in list_game_names(root)
        ]
        title = ALL_GAMES_TITLE

    cards = [
        render_highlight_card(highlight, game_name)
        for game_name, highlights in listings
        for highlight in highlights
    ]
    logger.info("[media] gallery %r: %d cards from %d game(s)", title, len(cards), len(listings))
    return Gallery(title=title, card_count=len(cards), body=render_gallery_page(title, cards))
