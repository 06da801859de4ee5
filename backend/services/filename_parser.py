"""Parse highlight metadata out of recorded clip filenames.

Expected shape::

    <Hero> <N>K <Gamemode>_<DD-DD-DD>_<DD-DD-DD>.mp4
"""

from __future__ import annotations

import re

from models import HighlightRecord, ParsedHighlight, UnparsedHighlight

# Gamemode is non-greedy so the trailing date/time pair wins over any
# digit-hyphen runs inside the gamemode text.
HIGHLIGHT_FILENAME_RE = re.compile(
    r"([A-Za-z]+)\s([0-9]+K)\s(.+?)_([0-9]{2}-[0-9]{2}-[0-9]{2})_([0-9]{2}-[0-9]{2}-[0-9]{2})\.mp4"
)


def parse_highlight_filename(filename: str) -> HighlightRecord:
    """Classify a filename as a ParsedHighlight or an UnparsedHighlight. Never raises."""
    match = HIGHLIGHT_FILENAME_RE.fullmatch(filename)
    if match is None:
        return UnparsedHighlight(original_filename=filename)

    hero, kills, gamemode, date, time = match.groups()
    return ParsedHighlight(
        original_filename=filename,
        hero=hero,
        kills=kills,
        gamemode=gamemode,
        date=date,
        time=time,
    )
