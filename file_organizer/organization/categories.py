"""
File categories for organizing a directory.

Defines the category folders and the static extension table used to
classify files.
"""

from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping


class Category(str, Enum):
    """Category folders files are sorted into."""

    IMAGES = "Images"
    VIDEOS = "Videos"
    AUDIO = "Audio"
    DOCUMENTS = "Documents"
    ARCHIVES = "Archives"
    OTHERS = "Others"  # Anything without a known extension


# Lowercase extensions without the leading dot. Lookup follows table order.
CATEGORY_EXTENSIONS: Mapping[Category, FrozenSet[str]] = MappingProxyType(
    {
        Category.IMAGES: frozenset(
            {"jpg", "jpeg", "png", "gif", "bmp", "webp", "svg", "heic"}
        ),
        Category.VIDEOS: frozenset({"mp4", "mkv", "mov", "avi", "flv", "wmv", "webm"}),
        Category.AUDIO: frozenset({"mp3", "wav", "aac", "flac", "ogg", "m4a"}),
        Category.DOCUMENTS: frozenset(
            {"pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx", "txt", "md", "odt"}
        ),
        Category.ARCHIVES: frozenset({"zip", "rar", "7z", "tar", "gz", "bz2", "xz"}),
    }
)


def get_extension(filename: str) -> str:
    """
    Get the extension of a filename, without the dot.

    Args:
        filename: File name (not a full path)

    Returns:
        Text after the last dot, or an empty string if the name has no
        dot or ends with one
    """
    idx = filename.rfind(".")
    if idx == -1 or idx == len(filename) - 1:
        return ""
    return filename[idx + 1 :]


def category_for_extension(extension: str) -> Category:
    """Look up the category owning an extension (case-insensitive)."""
    ext = extension.lower()
    if not ext:
        return Category.OTHERS

    for category, extensions in CATEGORY_EXTENSIONS.items():
        if ext in extensions:
            return category

    return Category.OTHERS


def categorize(filename: str) -> Category:
    """
    Classify a file by its extension.

    Args:
        filename: File name, e.g. "PHOTO.JPG"

    Returns:
        Owning category, or Category.OTHERS for missing/unknown extensions
    """
    return category_for_extension(get_extension(filename))
