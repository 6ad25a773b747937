"""Size-gated data URI encoding."""

from __future__ import annotations

import base64
import binascii
import mimetypes
import os
from pathlib import Path
from typing import Callable, Dict

from .core import storage
from .core.models import DEFAULT_ENCODING, DEFAULT_LIMIT
from .exceptions import UnsupportedEncodingError

_CODECS: Dict[str, Callable[[bytes], str]] = {
    "base64": lambda data: base64.b64encode(data).decode("ascii"),
    "base64url": lambda data: base64.urlsafe_b64encode(data).decode("ascii").rstrip("="),
    "hex": lambda data: binascii.hexlify(data).decode("ascii"),
    "utf8": lambda data: data.decode("utf-8", errors="replace"),
    "utf-8": lambda data: data.decode("utf-8", errors="replace"),
    "latin1": lambda data: data.decode("latin-1"),
    "binary": lambda data: data.decode("latin-1"),
    "ascii": lambda data: bytes(b & 0x7F for b in data).decode("ascii"),
}


def guess_mimetype(name: str | Path) -> str:
    mimetype, _ = mimetypes.guess_type(str(name), strict=False)
    return mimetype or ""


def encode_payload(data: bytes, encoding: str) -> str:
    codec = _CODECS.get(encoding.lower())
    if codec is None:
        raise UnsupportedEncodingError(encoding)
    return codec(data)


def build_data_uri(data: bytes, name: str | Path, encoding: str = DEFAULT_ENCODING) -> str:
    return f"data:{guess_mimetype(name)};{encoding},{encode_payload(data, encoding)}"


async def try_inline(
    file: bytes | str | Path,
    name: str | Path,
    limit: int = DEFAULT_LIMIT,
    encoding: str = DEFAULT_ENCODING,
) -> str | None:
    """Return ``file`` as a data URI, or ``None`` when it is larger than ``limit``.

    ``file`` is raw content or a path; a ``Path`` or an absolute path string
    is read from disk, any other string is taken as binary content (the low byte
    of each character, as latin-1).
    """
    if isinstance(file, Path) or (isinstance(file, str) and os.path.isabs(file)):
        data = await storage.read_bytes(file)
    elif isinstance(file, str):
        data = bytes(ord(char) & 0xFF for char in file)
    else:
        data = bytes(file)

    if len(data) > limit:
        return None
    return build_data_uri(data, name, encoding)
