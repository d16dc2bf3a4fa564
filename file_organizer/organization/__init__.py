"""
Organization module for sorting files by type.

This module classifies the files of a directory by extension and moves
them into category folders, with dry-run previews, collision-safe
destinations, and a plain-text move log.
"""

from .categories import CATEGORY_EXTENSIONS, Category, categorize, get_extension
from .file_organizer import FileOrganizer, InvalidTargetError, OrganizationResult
from .move_log import MoveLog, MoveRecord, MoveStatus
from .paths import resolve_unique_destination, split_extension

__all__ = [
    "CATEGORY_EXTENSIONS",
    "Category",
    "categorize",
    "get_extension",
    "FileOrganizer",
    "InvalidTargetError",
    "OrganizationResult",
    "MoveLog",
    "MoveRecord",
    "MoveStatus",
    "resolve_unique_destination",
    "split_extension",
]
