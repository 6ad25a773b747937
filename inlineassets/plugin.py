"""Build-host plugin that inlines small assets as data URIs.

The host constructs the plugin once per build with :func:`plugin`, reports the
build mode through :meth:`AssetResolver.run` and then calls
:meth:`AssetResolver.load` for every file whose extension is listed in
``resolve.input``. Loads may run concurrently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping

from . import encoder, paths
from .core import generator
from .core.models import (
    AssetContent,
    BuildMode,
    Configuration,
    FileRequest,
    HostConfig,
    LoadResult,
)
from .core.options import normalize_options

PLUGIN_NAME = "inline-assets"

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolveSpec:
    input: List[str] = field(default_factory=list)
    output: List[str] = field(default_factory=list)


class AssetResolver:
    name = PLUGIN_NAME

    def __init__(
        self,
        host_config: HostConfig,
        config: Configuration,
        build_mode: BuildMode | None = None,
    ) -> None:
        self.host_config = host_config
        self.config = config
        self.build_mode = build_mode or BuildMode()
        self.resolve = ResolveSpec(
            input=list(config.extensions),
            output=[".js", *config.extensions],
        )

    async def run(self, options: Mapping[str, Any] | None = None, *, is_dev: bool | None = None) -> None:
        if is_dev is None:
            is_dev = bool((options or {}).get("isDev"))
        self.build_mode = BuildMode(is_dev=is_dev)

    async def load(self, request: FileRequest | Mapping[str, Any]) -> Dict[str, AssetContent]:
        result = await self.load_result(request)
        return result.outputs

    async def load_result(self, request: FileRequest | Mapping[str, Any]) -> LoadResult:
        if not isinstance(request, FileRequest):
            request = FileRequest.from_dict(request)

        uri = await encoder.try_inline(
            Path(request.file_path),
            request.file_path,
            limit=self.config.size_limit,
            encoding=self.config.data_uri_encoding,
        )
        if uri is not None:
            _log.info("Inlined File: %s", request.file_path)
            return LoadResult(outputs={".js": generator.render_module(uri)}, inlined=True)

        web_path = paths.to_web_path(request.file_path, self.host_config.cwd, self.host_config.mount)
        emitted = await generator.emit(request, web_path, self.build_mode, self.host_config.out_dir)
        ext, content = emitted.raw_asset
        result = LoadResult(
            outputs={".js": emitted.module_stub, ext: content},
            inlined=False,
            web_path=web_path,
        )
        if emitted.copy_task is not None:
            try:
                await emitted.copy_task
            except OSError as exc:
                _log.warning("Failed to copy %s to build output: %s", request.file_path, exc)
                result.warnings.append(f"Failed to copy {request.file_path}: {exc}")
        return result


def plugin(host_config: HostConfig | Mapping[str, Any], options: Any = None) -> AssetResolver:
    if not isinstance(host_config, HostConfig):
        host_config = HostConfig.from_dict(host_config or {})
    return AssetResolver(host_config, normalize_options(options))
