"""Handlers for whitelisted static files and the rendered template page."""

from datetime import datetime
from pathlib import Path

from config import TEMPLATE_MARKER
from request import HTTPRequest
from response import HTTPResponse
from utils import get_content_type, resolve_static_file


def not_found() -> HTTPResponse:
    return HTTPResponse(status_code=404)


def serve_static(request: HTTPRequest, static_dir: Path) -> HTTPResponse:
    static_path = resolve_static_file(request.path, static_dir)
    return HTTPResponse(
        status_code=200,
        headers={"Content-Type": get_content_type(static_path)},
        file_path=static_path,
    )


def render_template(request: HTTPRequest, static_dir: Path) -> HTTPResponse:
    """Substitute the current local time for every marker in the page."""
    template_path = resolve_static_file(request.path, static_dir)
    template = template_path.read_text(encoding="utf-8")
    content = template.replace(TEMPLATE_MARKER, datetime.now().isoformat())
    return HTTPResponse(
        status_code=200,
        headers={"Content-Type": get_content_type(template_path)},
        body=content.encode("utf-8"),
    )
