"""Low-level read/write helpers for one client connection."""

from __future__ import annotations

from typing import BinaryIO

from config import WRITE_CHUNK_SIZE
from response import HTTPResponse, prepare_response


LINE_TERMINATORS = (b"\r", b"\n")


def read_request_line(reader: BinaryIO) -> str | None:
    """Read the request line from the connection's input side.

    The line ends at the first `\\r` or `\\n`, so a bare `\\r` terminates it
    without waiting for more bytes. Returns None when the peer closed the
    stream before sending any byte.
    """
    raw_line = bytearray()
    while True:
        byte = reader.read(1)
        if not byte:
            if not raw_line:
                return None
            break
        if byte in LINE_TERMINATORS:
            break
        raw_line.extend(byte)

    return raw_line.decode("iso-8859-1")


def write_http_response_message(
    writer: BinaryIO,
    response: HTTPResponse,
    *,
    write_chunk_size: int = WRITE_CHUNK_SIZE,
) -> int:
    """Write an HTTPResponse, copying file bodies in chunks. Returns bytes written."""
    prepared = prepare_response(response)
    writer.write(prepared.head)
    bytes_sent = len(prepared.head)

    if prepared.body is not None:
        if prepared.body:
            writer.write(prepared.body)
            bytes_sent += len(prepared.body)
    elif prepared.file_path is not None:
        with prepared.file_path.open("rb") as file_obj:
            while True:
                chunk = file_obj.read(write_chunk_size)
                if not chunk:
                    break
                writer.write(chunk)
                bytes_sent += len(chunk)

    writer.flush()
    return bytes_sent
