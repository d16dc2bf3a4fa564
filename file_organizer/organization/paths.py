"""Destination path helpers for collision-safe moves."""

from pathlib import Path
from typing import AbstractSet, Optional, Tuple


def split_extension(filename: str) -> Tuple[str, str]:
    """
    Split a filename into base and extension at the last dot.

    The extension keeps its dot: "archive.tar.gz" -> ("archive.tar", ".gz").
    A name without a dot is all base: "README" -> ("README", "").
    """
    idx = filename.rfind(".")
    if idx == -1:
        return filename, ""
    return filename[:idx], filename[idx:]


def _is_taken(path: Path, reserved: AbstractSet[Path]) -> bool:
    return path in reserved or path.exists()


def resolve_unique_destination(
    category_dir: Path,
    filename: str,
    reserved: Optional[AbstractSet[Path]] = None,
) -> Path:
    """
    Resolve a destination that does not collide with any existing file.

    Appends " (1)", " (2)", ... before the extension until a free name is
    found.

    Args:
        category_dir: Directory the file is moving into
        filename: Original file name
        reserved: Destinations already claimed earlier in the same run

    Returns:
        Path that neither exists nor is reserved
    """
    if reserved is None:
        reserved = frozenset()

    candidate = category_dir / filename
    if not _is_taken(candidate, reserved):
        return candidate

    base, ext = split_extension(filename)
    counter = 1
    while True:
        candidate = category_dir / f"{base} ({counter}){ext}"
        if not _is_taken(candidate, reserved):
            return candidate
        counter += 1
