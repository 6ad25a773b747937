"""Mapping of project files to their public (web-facing) paths."""

from __future__ import annotations

from typing import Any, Iterator, Mapping

SEP = "/"


def to_web_path(absolute_path: str, cwd: str, mount: Any) -> str:
    """Rewrite ``absolute_path`` through the host's mount table.

    The first mount prefix (in table order) that the cwd-relative path starts
    with is replaced by its directory; later, longer prefixes are not
    considered. Unmatched paths come back cwd-relative and otherwise unchanged.
    """
    root_path = _strip_root(_normalize_sep(absolute_path), _normalize_sep(cwd))
    for prefix, directory in iter_mount_entries(mount):
        if root_path.startswith(prefix):
            directory = directory if directory.endswith(SEP) else f"{directory}{SEP}"
            return directory + root_path[len(prefix):]
    return root_path


def iter_mount_entries(mount: Any) -> Iterator[tuple[str, str]]:
    if not mount:
        return
    items = mount.items() if isinstance(mount, Mapping) else mount
    for prefix, directory in items:
        yield str(prefix), str(directory)


def _strip_root(path: str, cwd: str) -> str:
    root = cwd if cwd.endswith(SEP) else f"{cwd}{SEP}"
    if cwd and path.startswith(root):
        return path[len(root):]
    return path


def _normalize_sep(value: str) -> str:
    return str(value).replace("\\", SEP)
