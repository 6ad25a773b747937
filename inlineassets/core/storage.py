import asyncio
import shutil
from pathlib import Path


async def read_bytes(path: str | Path) -> bytes:
    return await asyncio.to_thread(Path(path).read_bytes)


async def read_text(path: str | Path, encoding: str = "utf-8") -> str:
    return await asyncio.to_thread(Path(path).read_text, encoding=encoding)


def copy_file(src: str | Path, dest: str | Path) -> Path:
    dest = Path(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, dest)
    return dest


async def copy_file_async(src: str | Path, dest: str | Path) -> Path:
    return await asyncio.to_thread(copy_file, src, dest)
