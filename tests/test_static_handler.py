"""Unit tests for static file and template handlers."""

from pathlib import Path

import pytest

from handlers.static_handlers import not_found, render_template, serve_static
from request import HTTPRequest
from utils import get_content_type, resolve_static_file


def _build_request(path: str) -> HTTPRequest:
    return HTTPRequest(method="GET", path=path, http_version="HTTP/1.1")


def test_resolve_static_file_joins_under_root(tmp_path: Path) -> None:
    assert resolve_static_file("/index.html", tmp_path) == tmp_path / "index.html"


def test_content_type_lookup() -> None:
    assert get_content_type(Path("index.html")) == "text/html"
    assert get_content_type(Path("styles.css")) == "text/css"
    assert get_content_type(Path("spring.png")) == "image/png"
    assert get_content_type(Path("spring.svg")) == "image/svg+xml"
    assert "javascript" in get_content_type(Path("app.js"))


def test_unknown_content_type_falls_back_to_octet_stream() -> None:
    assert get_content_type(Path("blob.unknownext")) == "application/octet-stream"


def test_serve_static_points_at_file(tmp_path: Path) -> None:
    (tmp_path / "index.html").write_text("<h1>hi</h1>", encoding="utf-8")

    response = serve_static(_build_request("/index.html"), tmp_path)

    assert response.status_code == 200
    assert response.headers == {"Content-Type": "text/html"}
    assert response.file_path == tmp_path / "index.html"
    assert response.to_bytes().endswith(b"<h1>hi</h1>")


def test_render_template_replaces_every_marker(tmp_path: Path) -> None:
    (tmp_path / "classic.html").write_text(
        "Time is {time}, again {time}.",
        encoding="utf-8",
    )

    response = render_template(_build_request("/classic.html"), tmp_path)

    body = response.body.decode("utf-8")
    assert response.status_code == 200
    assert response.headers["Content-Type"] == "text/html"
    assert "{time}" not in body
    assert body.startswith("Time is ")
    assert body.count(", again ") == 1


def test_render_template_length_counts_rendered_bytes(tmp_path: Path) -> None:
    (tmp_path / "classic.html").write_text("Zeit {time} é", encoding="utf-8")

    response = render_template(_build_request("/classic.html"), tmp_path)

    raw = response.to_bytes()
    head, body = raw.split(b"\r\n\r\n", 1)
    assert f"Content-Length: {len(body)}".encode() in head
    assert body.endswith("é".encode("utf-8"))


def test_render_template_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        render_template(_build_request("/classic.html"), tmp_path)


def test_not_found_has_no_body() -> None:
    response = not_found()

    assert response.status_code == 404
    assert response.body == b""
    assert response.headers == {}
