"""Async JSON file persistence with atomic writes and file locking.

Usage::

    store = JsonStore("output/entries.json")
    data = await store.load(default={})
    await store.update(lambda d: {**d, "new_key": "value"}, default={})
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from typing import Any

import aiofiles
import aiofiles.os
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

logger = logging.getLogger(__name__)


@retry(
    wait=wait_fixed(0.1),
    stop=stop_after_attempt(3),
    retry=retry_if_exception_type(PermissionError),
    before_sleep=before_sleep_log(logger, logging.INFO),
    reraise=True,
)
async def _replace(src: str, dst: str) -> None:
    """Rename ``src`` over ``dst``, retried while ``dst`` is briefly held open."""
    await asyncio.to_thread(os.replace, src, dst)


class JsonStore:
    """Async JSON file store with atomic writes.

    - **Atomic writes**: data is written to a temp file then renamed,
      so a crash mid-write never leaves a truncated file behind.
    - **Async I/O**: uses aiofiles for non-blocking reads/writes.
    - **Per-store lock**: asyncio.Lock serializes writers of the same file.
    """

    def __init__(self, path: str, indent: int = 2) -> None:
        self.path = os.path.abspath(path)
        self.indent = indent
        self._lock = asyncio.Lock()

    async def load(self, default: Any = None) -> Any:
        """Load JSON from file. Returns ``default`` if file doesn't exist."""
        return await self._load_unlocked(default)

    async def update(self, fn: Any, default: Any = None, *, remove_empty: bool = False) -> Any:
        """Load, apply fn, save, and return the updated data.

        With ``remove_empty`` an empty result deletes the file instead of
        writing an empty document::

            await store.update(lambda d: {**d, "key": "value"})
        """
        async with self._lock:
            data = await self._load_unlocked(default)
            data = fn(data)
            if remove_empty and not data:
                await self._remove_unlocked()
            else:
                await self._save_unlocked(data)
            return data

    # -- Internal helpers (no locking) --

    async def _load_unlocked(self, default: Any = None) -> Any:
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                text = await f.read()
            return json.loads(text)
        except FileNotFoundError:
            return default if default is not None else {}
        except json.JSONDecodeError:
            logger.warning("Corrupt JSON in %s, returning default", self.path)
            return default if default is not None else {}

    async def _save_unlocked(self, data: Any) -> None:
        dir_name = os.path.dirname(self.path)
        await aiofiles.os.makedirs(dir_name, exist_ok=True)
        # Temp file in the same directory so the rename stays on one filesystem
        fd, tmp_path = tempfile.mkstemp(
            dir=dir_name, suffix=".tmp", prefix=".jsonstore_"
        )
        try:
            async with aiofiles.open(fd, "w", encoding="utf-8", closefd=True) as f:
                await f.write(json.dumps(data, indent=self.indent, ensure_ascii=False))
            await _replace(tmp_path, self.path)
        except BaseException:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise

    async def _remove_unlocked(self) -> None:
        try:
            await aiofiles.os.remove(self.path)
            logger.info("Removed empty store %s", self.path)
        except FileNotFoundError:
            pass
