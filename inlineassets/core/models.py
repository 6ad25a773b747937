"""Data models for the inline-assets transform."""

from __future__ import annotations

import asyncio
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

DEFAULT_EXTS: Tuple[str, ...] = ("jpg", "jpeg", "png", "svg")
DEFAULT_LIMIT = 10240
DEFAULT_ENCODING = "base64"
DEFAULT_OUT_DIR = "build"

AssetContent = Union[str, bytes]


@dataclass(frozen=True)
class Configuration:
    """Canonical plugin options, see ``core.options.normalize_options``."""

    extensions: Tuple[str, ...]
    size_limit: int = DEFAULT_LIMIT
    data_uri_encoding: str = DEFAULT_ENCODING

    def to_dict(self) -> dict:
        return {
            "exts": list(self.extensions),
            "limit": self.size_limit,
            "encoding": self.data_uri_encoding,
        }


@dataclass(frozen=True)
class BuildMode:
    is_dev: bool = True


@dataclass
class HostConfig:
    """The parts of the host build tool's configuration this plugin reads."""

    cwd: str
    mount: Any = field(default_factory=dict)  # mapping or (prefix, dir) pairs
    out_dir: str = DEFAULT_OUT_DIR

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], cwd: str | Path | None = None) -> "HostConfig":
        dev_options = data.get("devOptions") or {}
        out_dir = dev_options.get("out") or data.get("out") or DEFAULT_OUT_DIR
        return cls(
            cwd=str(cwd if cwd is not None else data.get("cwd") or os.getcwd()),
            mount=data.get("mount") or {},
            out_dir=str(out_dir),
        )


@dataclass
class FileRequest:
    file_path: str
    file_ext: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FileRequest":
        file_path = data.get("filePath", data.get("file_path"))
        if not file_path:
            raise ValueError("load request is missing 'filePath'")
        file_ext = data.get("fileExt", data.get("file_ext")) or Path(str(file_path)).suffix
        return cls(file_path=str(file_path), file_ext=str(file_ext))


@dataclass
class EmitResult:
    module_stub: str
    raw_asset: Tuple[str, AssetContent]
    copy_task: Optional[asyncio.Task] = None


@dataclass
class LoadResult:
    outputs: Dict[str, AssetContent]
    inlined: bool
    web_path: str = ""
    warnings: List[str] = field(default_factory=list)
