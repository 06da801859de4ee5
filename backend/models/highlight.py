from dataclasses import dataclass
from typing import Literal

INVALID_FILENAME_REASON = "Filename does not match expected format."


@dataclass(frozen=True)
class ParsedHighlight:
    original_filename: str
    hero: str                  # letters only, e.g. "Tracer"
    kills: str                 # digits + "K" suffix, e.g. "25K"
    gamemode: str
    date: str                  # DD-DD-DD
    time: str                  # DD-DD-DD
    is_valid: Literal[True] = True


@dataclass(frozen=True)
class UnparsedHighlight:
    original_filename: str
    error: str = INVALID_FILENAME_REASON
    is_valid: Literal[False] = False


HighlightRecord = ParsedHighlight | UnparsedHighlight
