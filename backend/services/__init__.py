from .filename_parser import parse_highlight_filename
from .media_library import GameNotFoundError, build_gallery, get_media_root
from .renderer import render_gallery_page, render_highlight_card

__all__ = [
    "parse_highlight_filename",
    "render_highlight_card",
    "render_gallery_page",
    "build_gallery",
    "get_media_root",
    "GameNotFoundError",
]
