from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

MP4_HEADER = b"\x00\x00\x00\x18ftypmp42"


@pytest.fixture
def media_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty media root wired in through HIGHLIGHTS_MEDIA_ROOT."""
    root = tmp_path / "public"
    root.mkdir()
    monkeypatch.setenv("HIGHLIGHTS_MEDIA_ROOT", str(root))
    return root


@pytest.fixture
def add_clips(media_root: Path) -> Callable[..., Path]:
    """Create a game directory under media_root holding the named (tiny) clip files."""

    def _add(game: str, *names: str) -> Path:
        game_dir = media_root / game
        game_dir.mkdir(exist_ok=True)
        for name in names:
            (game_dir / name).write_bytes(MP4_HEADER)
        return game_dir

    return _add
