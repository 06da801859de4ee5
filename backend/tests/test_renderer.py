from models import ParsedHighlight, UnparsedHighlight
from services.filename_parser import parse_highlight_filename
from services.renderer import (
    format_date,
    format_time,
    render_gallery_page,
    render_highlight_card,
    video_path,
)

REAPER = "Reaper 40K Deathmatch_01-02-23_10-30-00.mp4"


def test_format_date_and_time() -> None:
    assert format_date("03-14-24") == "03/14/24"
    assert format_time("18-45-09") == "18:45:09"


def test_parsed_card_embeds_filename_in_path_and_text() -> None:
    card = render_highlight_card(parse_highlight_filename(REAPER), "OverwatchClone")

    path = f"/OverwatchClone/{REAPER}"
    assert video_path("OverwatchClone", REAPER) == path
    assert f'<video class="w-full h-full object-cover" src="{path}" autoplay loop muted playsinline></video>' in card
    assert f'<a href="{path}"' in card
    assert f"Filename: <code>{REAPER}</code>" in card
    assert f'data-filename="{REAPER}"' in card


def test_parsed_card_shows_metadata() -> None:
    card = render_highlight_card(parse_highlight_filename(REAPER), "OverwatchClone")
    assert '<span class="font-medium text-gray-600">OverwatchClone</span>' in card
    assert '<h2 class="text-xl font-semibold mb-2 text-blue-700">Reaper</h2>' in card
    assert '<span class="font-bold text-red-600">40K</span>' in card
    assert '<span class="font-medium">Deathmatch</span>' in card
    assert "Date: 01/02/23 at 10:30:00" in card
    assert "View Video" in card
    assert "Invalid Filename" not in card


def test_invalid_card_is_error_styled() -> None:
    card = render_highlight_card(parse_highlight_filename("not_a_valid_name.mp4"), "OverwatchClone")
    assert 'class="bg-red-50' in card
    assert "Invalid Filename" in card
    assert "Filename: <code>not_a_valid_name.mp4</code>" in card
    assert "Filename does not match expected format." in card
    assert "<video" not in card


def test_interpolated_values_are_escaped() -> None:
    name = 'Ana 5K <b>"x"&y_01-02-23_10-30-00.mp4'
    card = render_highlight_card(parse_highlight_filename(name), "Game<1>")
    assert "<b>" not in card
    assert "&lt;b&gt;&quot;x&quot;&amp;y" in card
    assert "Game&lt;1&gt;" in card

    bad = render_highlight_card(UnparsedHighlight(original_filename="<script>.mp4", error="a & b"), "G")
    assert "<script>" not in bad
    assert "&lt;script&gt;.mp4" in bad
    assert "a &amp; b" in bad


def test_page_wraps_cards_in_grid() -> None:
    cards = [
        render_highlight_card(
            ParsedHighlight(REAPER, "Reaper", "40K", "Deathmatch", "01-02-23", "10-30-00"),
            "OverwatchClone",
        ),
        render_highlight_card(UnparsedHighlight("bad.mp4"), "OverwatchClone"),
    ]
    page = render_gallery_page("Highlights for OverwatchClone", cards)
    assert '<h1 class="text-3xl font-bold mb-6 text-gray-800 rounded-md">Highlights for OverwatchClone</h1>' in page
    assert 'class="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-3 gap-6"' in page
    assert page.index(REAPER) < page.index("bad.mp4")
    assert page.count("data-filename=") == 2


def test_empty_page_has_title_only() -> None:
    page = render_gallery_page("All Game Highlights", [])
    assert "All Game Highlights" in page
    assert "data-filename=" not in page
