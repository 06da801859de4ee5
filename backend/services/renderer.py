"""HTML card and page rendering for the highlights gallery."""

from __future__ import annotations

from html import escape

from models import HighlightRecord, ParsedHighlight

_PARSED_CARD = """
      <div class="bg-white rounded-lg shadow-md p-5 border border-gray-200">
        <p class="text-sm text-gray-500 mb-1">Game: <span class="font-medium text-gray-600">{game}</span></p>
        <h2 class="text-xl font-semibold mb-2 text-blue-700">{hero}</h2>
        <p class="text-gray-700 mb-1">Kills: <span class="font-bold text-red-600">{kills}</span></p>
        <p class="text-gray-700 mb-1">Gamemode: <span class="font-medium">{gamemode}</span></p>
        <p class="text-gray-700 mb-3">Date: {date} at {time}</p>

        <div class="relative w-full aspect-video mb-4 rounded-md overflow-hidden">
          <video class="w-full h-full object-cover" src="{video_path}" autoplay loop muted playsinline></video>
        </div>

        <a href="{video_path}" target="_blank" rel="noopener noreferrer" class="block w-full text-center">
          <button class="bg-indigo-600 hover:bg-indigo-700 text-white font-bold py-2 px-4 rounded-md shadow-md transition duration-300 ease-in-out text-lg w-full">
            View Video
          </button>
        </a>

        <p class="text-sm text-gray-500 break-words mt-3" data-filename="{filename}">
          Filename: <code>{filename}</code>
        </p>
      </div>
    """

_INVALID_CARD = """
      <div class="bg-red-50 rounded-lg shadow-md p-5 border border-red-200">
        <p class="text-sm text-gray-500 mb-1">Game: <span class="font-medium text-gray-600">{game}</span></p>
        <h2 class="text-xl font-semibold mb-2 text-red-700">Invalid Filename</h2>
        <p class="text-gray-700 mb-1">This file could not be parsed:</p>
        <p class="text-sm text-gray-500 break-words" data-filename="{filename}">
          Filename: <code>{filename}</code>
        </p>
        <p class="text-sm text-red-500 mt-2">{error}</p>
      </div>
    """

_PAGE = """
      <div class="p-6">
        <h1 class="text-3xl font-bold mb-6 text-gray-800 rounded-md">{title}</h1>
        <div class="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-3 gap-6">
          {cards}
        </div>
      </div>
    """


def format_date(date: str) -> str:
    """03-14-24 -> 03/14/24"""
    return date.replace("-", "/")


def format_time(time: str) -> str:
    """18-45-09 -> 18:45:09"""
    return time.replace("-", ":")


def video_path(game_name: str, filename: str) -> str:
    # URL path under the static media mount; segments are not percent-encoded.
    return f"/{game_name}/{filename}"


def render_highlight_card(highlight: HighlightRecord, game_name: str) -> str:
    """
    Render one gallery card.

    Parsed highlights get a looping inline preview plus a link to the raw video;
    anything else gets the red "Invalid Filename" card carrying the parse error.
    Every interpolated value is HTML-escaped.
    """
    if isinstance(highlight, ParsedHighlight):
        return _PARSED_CARD.format(
            game=escape(game_name),
            hero=escape(highlight.hero),
            kills=escape(highlight.kills),
            gamemode=escape(highlight.gamemode),
            date=escape(format_date(highlight.date)),
            time=escape(format_time(highlight.time)),
            video_path=escape(video_path(game_name, highlight.original_filename)),
            filename=escape(highlight.original_filename),
        )
    return _INVALID_CARD.format(
        game=escape(game_name),
        filename=escape(highlight.original_filename),
        error=escape(highlight.error),
    )


def render_gallery_page(title: str, cards: list[str]) -> str:
    """Wrap rendered cards in the title heading and responsive grid."""
    return _PAGE.format(title=escape(title), cards="".join(cards))
