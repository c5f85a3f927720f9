"""Configuration constants for the whitelist static HTTP server."""

HOST: str = "0.0.0.0"
PORT: int = 9999
LISTEN_BACKLOG: int = 128
STATIC_DIR: str = "public"
WRITE_CHUNK_SIZE: int = 65_536
LOG_FORMAT: str = "plain"

VALID_PATHS: frozenset[str] = frozenset(
    {
        "/index.html",
        "/spring.svg",
        "/spring.png",
        "/resources.html",
        "/styles.css",
        "/app.js",
        "/links.html",
        "/forms.html",
        "/classic.html",
        "/events.html",
        "/events.js",
    }
)
TEMPLATE_PATH: str = "/classic.html"
TEMPLATE_MARKER: str = "{time}"
