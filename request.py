"""HTTP request-line model and parser."""

from dataclasses import dataclass


class HTTPRequestParseError(ValueError):
    """Raised when a request line cannot be split into method, path and version."""


@dataclass(slots=True, frozen=True)
class HTTPRequest:
    method: str
    path: str
    http_version: str

    @classmethod
    def from_request_line(cls, request_line: str) -> "HTTPRequest":
        """Parse `METHOD PATH VERSION` into a request.

        Tokens are separated by single spaces. Only the token count is
        checked; the path is kept verbatim (no decoding, no query
        stripping, no normalization).
        """
        parts = request_line.split(" ")
        if len(parts) != 3:
            raise HTTPRequestParseError(
                f"Invalid request line: expected 3 tokens, got {len(parts)}"
            )

        method, path, http_version = parts
        return cls(method=method, path=path, http_version=http_version)
