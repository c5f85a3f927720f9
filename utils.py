"""Utility helpers shared across server modules."""

import mimetypes
from pathlib import Path

from config import STATIC_DIR


def get_content_type(file_path: Path) -> str:
    content_type, _encoding = mimetypes.guess_type(file_path.name)
    return content_type or "application/octet-stream"


def resolve_static_file(request_path: str, static_dir: str | Path = STATIC_DIR) -> Path:
    """Map a request path onto the static root without any normalization."""
    return Path(static_dir) / request_path.lstrip("/")
