"""Utility helpers for walking directory trees."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional

LOGGER = logging.getLogger(__name__)

# Called as ``on_error(path, exc, kind)`` where ``kind`` is "directory" when a
# directory could not be listed and "entry" when a single entry could not be
# inspected.
ErrorCallback = Callable[[Path, OSError, str], None]


def has_extension(path: Path, extensions: Iterable[str]) -> bool:
    """Return True when the final suffix of ``path`` is one of ``extensions``."""
    suffix = path.suffix
    if not suffix:
        return False
    return suffix[1:].lower() in {ext.lstrip(".").lower() for ext in extensions}


def _list_dir(directory: Path, on_error: Optional[ErrorCallback]) -> Optional[List[os.DirEntry]]:
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        LOGGER.debug("Could not read directory %s: %s", directory, exc)
        if on_error is not None:
            on_error(directory, exc, "directory")
        return None


def iter_candidate_files(
    root: Path,
    extensions: Iterable[str],
    *,
    on_error: Optional[ErrorCallback] = None,
) -> Iterator[Path]:
    """Yield files under ``root`` whose extension is in ``extensions``.

    Directories are visited depth-first with entries in name order. Symlinked
    directories are not followed. Directories that cannot be listed and entries
    that cannot be inspected are passed to ``on_error`` and skipped.

    Descent uses an explicit stack, so nesting depth is not bounded by the
    interpreter's recursion limit.
    """
    wanted = frozenset(ext.lstrip(".").lower() for ext in extensions)
    stack: List[Iterator[os.DirEntry]] = []
    entries = _list_dir(Path(root), on_error)
    if entries is not None:
        stack.append(iter(entries))

    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        path = Path(entry.path)
        try:
            if entry.is_dir(follow_symlinks=False):
                children = _list_dir(path, on_error)
                if children is not None:
                    stack.append(iter(children))
                continue
            if entry.is_symlink() and entry.is_dir():
                LOGGER.debug("Skipping symlinked directory %s", path)
                continue
            is_file = entry.is_file()
        except OSError as exc:
            LOGGER.debug("Could not inspect %s: %s", path, exc)
            if on_error is not None:
                on_error(path, exc, "entry")
            continue

        if is_file and path.suffix and path.suffix[1:].lower() in wanted:
            yield path
