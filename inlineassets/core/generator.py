"""Module stub rendering and passthrough output for non-inlined assets."""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from pathlib import Path, PurePosixPath

from jinja2 import DictLoader, Environment

from . import storage
from .models import BuildMode, EmitResult, FileRequest

_log = logging.getLogger(__name__)

UTF8_FORMATS: frozenset[str] = frozenset(
    {".css", ".html", ".js", ".map", ".mjs", ".json", ".svg", ".txt", ".xml"}
)

MODULE_TEMPLATE = "export default {{ value | tojson }};"


@lru_cache(maxsize=1)
def _env() -> Environment:
    return Environment(
        loader=DictLoader({"module.js.j2": MODULE_TEMPLATE}),
        autoescape=False,
    )


def render_module(value: str) -> str:
    return _env().get_template("module.js.j2").render(value=value)


def encoding_for_extension(ext: str) -> str:
    return "utf-8" if ext.lower() in UTF8_FORMATS else "binary"


def output_path(out_dir: str | Path, web_path: str) -> Path:
    # Mount directories like "/dist" must still land inside out_dir.
    relative = PurePosixPath(web_path.lstrip("/"))
    return Path(out_dir).joinpath(*relative.parts)


async def emit(
    request: FileRequest,
    web_path: str,
    build_mode: BuildMode,
    out_dir: str | Path,
) -> EmitResult:
    """Render the passthrough outputs for ``request``.

    In production builds the source file is also copied to
    ``out_dir/web_path``; the copy runs as a task returned on the result and
    is left for the caller to await.
    """
    if encoding_for_extension(request.file_ext) == "utf-8":
        content: str | bytes = await storage.read_text(request.file_path)
    else:
        content = await storage.read_bytes(request.file_path)

    copy_task: asyncio.Task | None = None
    if not build_mode.is_dev:
        dest = output_path(out_dir, web_path)
        _log.debug("copying %s -> %s", request.file_path, dest)
        copy_task = asyncio.create_task(storage.copy_file_async(request.file_path, dest))

    return EmitResult(
        module_stub=render_module(web_path),
        raw_asset=(request.file_ext, content),
        copy_task=copy_task,
    )
