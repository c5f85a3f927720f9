"""HTTP response model and serializer."""

from dataclasses import dataclass, field
from pathlib import Path

REASON_PHRASES: dict[int, str] = {
    200: "OK",
    404: "Not Found",
}


@dataclass(slots=True)
class PreparedResponse:
    head: bytes
    body: bytes | None = None
    file_path: Path | None = None


@dataclass(slots=True)
class HTTPResponse:
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | str = b""
    file_path: Path | None = None

    def __post_init__(self) -> None:
        if isinstance(self.body, str):
            self.body = self.body.encode("utf-8")
        if self.file_path is not None and self.body:
            raise ValueError("Response cannot set both body and file_path")

    def to_bytes(self) -> bytes:
        """Serialize the response into HTTP/1.1 wire format bytes."""
        prepared = prepare_response(self)
        payload = bytearray(prepared.head)
        if prepared.body is not None:
            payload.extend(prepared.body)
        elif prepared.file_path is not None:
            payload.extend(prepared.file_path.read_bytes())
        return bytes(payload)


def prepare_response(response: HTTPResponse) -> PreparedResponse:
    """Build the response head; framing headers follow any caller headers.

    The file size is read here, so a missing file fails before any byte
    of the response has been produced.
    """
    reason = REASON_PHRASES.get(response.status_code, "Unknown")
    normalized_headers = dict(response.headers)

    body: bytes | None = None
    file_path: Path | None = None
    if response.file_path is not None:
        file_path = response.file_path
        content_length = file_path.stat().st_size
    else:
        body = response.body
        content_length = len(body)
    normalized_headers["Content-Length"] = str(content_length)
    normalized_headers["Connection"] = "close"

    header_lines = [f"HTTP/1.1 {response.status_code} {reason}"]
    header_lines.extend(f"{key}: {value}" for key, value in normalized_headers.items())
    head = "\r\n".join(header_lines).encode("iso-8859-1") + b"\r\n\r\n"
    return PreparedResponse(head=head, body=body, file_path=file_path)
