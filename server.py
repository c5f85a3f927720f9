"""Main HTTP server entry point and connection lifecycle orchestration."""

from __future__ import annotations

import argparse
import json
import logging
import socket
import sys
import time
from pathlib import Path

from config import HOST, LISTEN_BACKLOG, LOG_FORMAT, PORT, STATIC_DIR
from handlers.static_handlers import not_found
from request import HTTPRequest, HTTPRequestParseError
from response import HTTPResponse
from router import Router, build_default_router
from socket_handler import read_request_line, write_http_response_message

logger = logging.getLogger(__name__)


class HTTPServer:
    """Sequential server: one accepted connection is fully handled before the next accept."""

    def __init__(
        self,
        host: str = HOST,
        port: int = PORT,
        static_dir: str | Path = STATIC_DIR,
        router: Router | None = None,
        *,
        log_format: str = LOG_FORMAT,
    ) -> None:
        self.host = host
        self.port = port
        self.static_dir = Path(static_dir)
        self.router = router or build_default_router()
        self.log_format = log_format

        self._server_socket: socket.socket | None = None
        self._running = False

    def start(self) -> None:
        """Bind the listening port and serve connections until stopped."""
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server_socket:
            self._server_socket = server_socket
            server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            server_socket.bind((self.host, self.port))
            server_socket.listen(LISTEN_BACKLOG)
            self.port = server_socket.getsockname()[1]
            self._running = True
            logger.info(
                "Serving %s on %s:%s",
                self.static_dir,
                self.host,
                self.port,
            )

            while self._running:
                try:
                    client_socket, address = server_socket.accept()
                except OSError:
                    if not self._running:
                        break
                    self._running = False
                    logger.exception("Accept failed, stopping server")
                    raise

                try:
                    self._handle_client(client_socket, address)
                except Exception:
                    logger.exception("Unhandled error while handling client %s", address[0])

    def stop(self) -> None:
        self._running = False
        if self._server_socket is not None:
            try:
                self._server_socket.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass
            self._server_socket.close()
            self._server_socket = None

    def _handle_client(self, client_socket: socket.socket, address: tuple[str, int]) -> None:
        started_at = time.perf_counter()
        with (
            client_socket,
            client_socket.makefile("rb") as reader,
            client_socket.makefile("wb") as writer,
        ):
            request_line = read_request_line(reader)
            if request_line is None:
                logger.debug("Client %s closed without a request line", address[0])
                return

            try:
                request = HTTPRequest.from_request_line(request_line)
            except HTTPRequestParseError as exc:
                logger.debug("Dropping connection from %s: %s", address[0], exc)
                return

            response = self._dispatch(request)
            bytes_sent = write_http_response_message(writer, response)

        self._record_and_log(
            address=address,
            method=request.method,
            path=request.path,
            response=response,
            payload_size=bytes_sent,
            started_at=started_at,
        )

    def _dispatch(self, request: HTTPRequest) -> HTTPResponse:
        handler = self.router.resolve(request.path)
        if handler is None:
            return not_found()
        return handler(request, self.static_dir)

    def _record_and_log(
        self,
        *,
        address: tuple[str, int],
        method: str,
        path: str,
        response: HTTPResponse,
        payload_size: int,
        started_at: float,
    ) -> None:
        duration_ms = (time.perf_counter() - started_at) * 1000
        event = {
            "client": address[0],
            "method": method,
            "path": path,
            "status": response.status_code,
            "bytes_out": payload_size,
            "latency_ms": round(duration_ms, 3),
        }
        if self.log_format == "json":
            logger.info(json.dumps(event, sort_keys=True))
            return

        logger.info(
            "client=%s method=%s path=%s status=%s bytes_out=%s duration_ms=%.2f",
            event["client"],
            event["method"],
            event["path"],
            event["status"],
            event["bytes_out"],
            duration_ms,
        )


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the whitelisted files under public/")
    parser.add_argument("--host", default=HOST)
    parser.add_argument("--log-format", choices=["plain", "json"], default=LOG_FORMAT)
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))
    server = HTTPServer(host=args.host, port=PORT, log_format=args.log_format)
    try:
        server.start()
    except KeyboardInterrupt:
        server.stop()
    except OSError:
        logger.exception("Server stopped on a listener error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
