"""File-system backed catalog asset source."""

from __future__ import annotations

import asyncio
from logging import getLogger
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cobbledex.domain.ports import AssetSource

log = getLogger(__name__)


class FileSystemAssetSource:
    """Serve a species tree rooted at a local directory.

    Blocking file-system calls run in worker threads so the event loop stays free.
    """

    def __init__(self, root: Path) -> None:
        self._root = root.expanduser().resolve()

    @property
    def root(self) -> Path:
        return self._root

    async def list_entries(self, path: str = "") -> list[str]:
        target = self._resolve(path)
        return await asyncio.to_thread(_list_dir, target)

    async def read_entry(self, path: str) -> bytes:
        target = self._resolve(path)
        return await asyncio.to_thread(target.read_bytes)

    def _resolve(self, path: str) -> Path:
        relative = PurePosixPath(path)
        if relative.is_absolute() or ".." in relative.parts:
            raise FileNotFoundError(f"Asset path escapes the catalog root: {path!r}")
        return self._root.joinpath(*relative.parts)


def _list_dir(target: Path) -> list[str]:
    if not target.is_dir():
        raise NotADirectoryError(f"Not a catalog directory: {target}")
    return sorted(child.name for child in target.iterdir())


if TYPE_CHECKING:
    _source_check: AssetSource = FileSystemAssetSource(Path())
