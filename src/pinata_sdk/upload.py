"""Upload assembler - turns local files and directories into named parts."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilePart:
    """One file of a multipart upload.

    ``filename`` is the base name for a single file, or
    ``<directory>/<relative/path>`` for files found under a directory, so
    Pinata can rebuild the tree.
    """

    filename: str
    content: bytes


def collect_file_parts(path: str | os.PathLike) -> list[FilePart]:
    """Read one file, or every file under one directory, into parts.

    Directories themselves produce no part. Reads are sequential and the
    first unreadable file aborts with its ``OSError``.
    """
    base = Path(path)
    if not base.is_dir():
        return [FilePart(filename=base.name, content=base.read_bytes())]

    root_name = base.resolve().name if base.name in ("", ".", "..") else base.name
    parts: list[FilePart] = []
    for dirpath, dirnames, filenames in os.walk(base, onerror=_raise):
        # os.walk does not descend into symlinked directories by default
        dirnames.sort()
        for name in sorted(filenames):
            file_path = Path(dirpath) / name
            if file_path.is_dir():
                continue
            relative = file_path.relative_to(base)
            parts.append(
                FilePart(
                    filename=f"{root_name}/{relative.as_posix()}",
                    content=file_path.read_bytes(),
                )
            )
    log.debug("Collected %d file(s) under %s", len(parts), base)
    return parts


def assemble_parts(paths: Iterable[str | os.PathLike]) -> list[FilePart]:
    """Collect parts for several paths, rejecting duplicate part names."""
    parts: list[FilePart] = []
    seen: set[str] = set()
    for path in paths:
        for part in collect_file_parts(path):
            if part.filename in seen:
                raise ValueError(f"duplicate upload part name: {part.filename}")
            seen.add(part.filename)
            parts.append(part)
    total = sum(len(p.content) for p in parts)
    log.info("Assembled %d part(s), %d bytes", len(parts), total)
    return parts


def _raise(exc: OSError) -> None:
    raise exc
