"""Unary gRPC-web calls over an httpx.AsyncClient.

Wire format: every message is one frame of a flag byte, a 4-byte big-endian
length and the payload. Flag 0x00 marks a data frame, 0x80 the trailer frame
whose payload holds `grpc-status` / `grpc-message` header lines.
"""
import struct
from typing import Dict, List, Tuple
from urllib.parse import unquote

import httpx

from .errors import RpcError

CONTENT_TYPE = "application/grpc-web+proto"
DATA_FLAG = 0x00
TRAILER_FLAG = 0x80

# grpc status codes used locally
OK = 0
UNKNOWN = 2
NOT_FOUND = 5
INTERNAL = 13

_HEADER = struct.Struct(">BI")


def encode_frame(payload: bytes, flag: int = DATA_FLAG) -> bytes:
    return _HEADER.pack(flag, len(payload)) + payload


def decode_frames(body: bytes) -> List[Tuple[int, bytes]]:
    frames = []
    pos = 0
    while pos < len(body):
        if len(body) - pos < _HEADER.size:
            raise RpcError(INTERNAL, "truncated grpc-web frame header")
        flag, length = _HEADER.unpack_from(body, pos)
        pos += _HEADER.size
        if len(body) - pos < length:
            raise RpcError(INTERNAL, "truncated grpc-web frame")
        frames.append((flag, body[pos:pos + length]))
        pos += length
    return frames


def parse_trailers(payload: bytes) -> Dict[str, str]:
    trailers = {}
    for line in payload.decode("utf-8", errors="replace").split("\r\n"):
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        trailers[key.strip().lower()] = value.strip()
    return trailers


def route(service: str, method: str) -> str:
    """Path of `method` on the fully qualified `service`, relative to the base url."""
    return f"{service}/{method}"


def check_status(meta) -> None:
    status = meta.get("grpc-status")
    if status is None:
        return
    try:
        code = int(status)
    except ValueError:
        code = UNKNOWN
    if code == OK:
        return
    raise RpcError(code, unquote(meta.get("grpc-message", "")))


class GrpcWebTransport:
    def __init__(self, client: httpx.AsyncClient, base_url: str):
        self.client = client
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"

    async def unary(self, path: str, request, response_class):
        """POST `request` to `path` and decode one `response_class` message."""
        r = await self.client.post(
            self.base_url + path,
            content=encode_frame(request.SerializeToString()),
            headers={
                "content-type": CONTENT_TYPE,
                "accept": CONTENT_TYPE,
                "x-grpc-web": "1",
            },
        )
        r.raise_for_status()
        # trailers-only responses carry the status in the http headers
        check_status(r.headers)

        message = None
        for flag, payload in decode_frames(r.content):
            if flag & TRAILER_FLAG:
                check_status(parse_trailers(payload))
            elif message is None:
                message = response_class.FromString(payload)
        if message is None:
            raise RpcError(INTERNAL, f"{path}: response carried no message")
        return message
