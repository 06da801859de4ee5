"""Run the highlights gallery with uvicorn: python serve.py"""

import logging
import os

import uvicorn
from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), ".env"))
logging.basicConfig(level=logging.INFO)

from app.main import app  # noqa: E402
from services.media_library import get_media_root  # noqa: E402

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


def get_bind_address() -> tuple[str, int]:
    host = os.environ.get("HIGHLIGHTS_HOST", "").strip() or DEFAULT_HOST
    port = os.environ.get("HIGHLIGHTS_PORT", "").strip()
    return host, int(port) if port else DEFAULT_PORT


def main() -> None:
    host, port = get_bind_address()
    logging.getLogger(__name__).info("[serve] serving %s on http://%s:%d", get_media_root(), host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
