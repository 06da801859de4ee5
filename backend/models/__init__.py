from .highlight import (
    INVALID_FILENAME_REASON,
    HighlightRecord,
    ParsedHighlight,
    UnparsedHighlight,
)

__all__ = [
    "HighlightRecord",
    "ParsedHighlight",
    "UnparsedHighlight",
    "INVALID_FILENAME_REASON",
]
