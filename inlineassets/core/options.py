"""Normalization of user-supplied plugin options.

Malformed values never raise; each field silently falls back to its default.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping

from .models import DEFAULT_ENCODING, DEFAULT_EXTS, DEFAULT_LIMIT, Configuration

_MISSING = object()


def normalize_options(options: Mapping[str, Any] | Any | None) -> Configuration:
    exts = _option(options, "exts")
    limit = _option(options, "limit")
    encoding = _option(options, "encoding")
    return Configuration(
        extensions=normalize_extensions(exts),
        size_limit=normalize_limit(limit),
        data_uri_encoding=encoding if isinstance(encoding, str) and encoding else DEFAULT_ENCODING,
    )


def normalize_extensions(exts: Any) -> tuple[str, ...]:
    accepted: list[str] = []
    if isinstance(exts, (list, tuple)):
        accepted = _dotted(ext for ext in exts if isinstance(ext, str) and ext.strip().strip("."))
    return tuple(accepted) if accepted else tuple(_dotted(DEFAULT_EXTS))


def normalize_limit(limit: Any = _MISSING) -> int:
    """Coerce ``limit`` to a byte count the way a JavaScript ``Number()`` would.

    An absent value gives the default; ``None`` and blank strings give 0.
    Unparsable, NaN and infinite values give the default.
    """
    if limit is _MISSING or limit is True:
        return DEFAULT_LIMIT
    if limit is False or limit is None:
        return 0
    if isinstance(limit, str):
        limit = _parse_number(limit)
        if limit is None:
            return DEFAULT_LIMIT
    if not isinstance(limit, (int, float)) or not math.isfinite(limit):
        return DEFAULT_LIMIT
    return max(int(limit), 0)


def _parse_number(text: str) -> int | float | None:
    text = text.strip()
    if not text:
        return 0
    if "_" in text:
        return None
    try:
        return int(text, 0)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None


def _dotted(exts: Iterable[str]) -> list[str]:
    out: list[str] = []
    for ext in exts:
        ext = ext.strip()
        dotted = ext if ext.startswith(".") else f".{ext}"
        if dotted not in out:
            out.append(dotted)
    return out


def _option(options: Any, key: str) -> Any:
    if options is None:
        return _MISSING
    if isinstance(options, Mapping):
        return options.get(key, _MISSING)
    return getattr(options, key, _MISSING)
