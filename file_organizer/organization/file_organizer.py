"""
File organizer for sorting a directory by file type.

Moves every top-level file into a category subfolder, with dry-run
previews, collision-safe destinations, and a plain-text move log.
"""

import logging
import shutil
from pathlib import Path
from typing import List, Optional, Set

from pydantic import BaseModel, Field

from ..config import OrganizerSettings
from ..config import settings as default_settings
from .categories import categorize
from .move_log import MoveLog, MoveRecord, MoveStatus
from .paths import resolve_unique_destination

logger = logging.getLogger(__name__)


class InvalidTargetError(ValueError):
    """Target path is missing or is not a directory."""


class OrganizationResult(BaseModel):
    """Result of an organization run."""

    target_directory: Path
    total_files: int = 0
    moved: int = 0
    failed: int = 0
    skipped: int = 0
    dry_run: bool = False
    created_directories: List[Path] = Field(default_factory=list)
    log_path: Optional[Path] = None
    errors: List[str] = Field(default_factory=list)
    records: List[MoveRecord] = Field(default_factory=list)


class FileOrganizer:
    """Organize the files of one directory into category folders."""

    def __init__(
        self,
        target_directory: Path,
        dry_run: bool = False,
        settings: Optional[OrganizerSettings] = None,
    ):
        """
        Initialize file organizer.

        Args:
            target_directory: Directory whose files are organized
            dry_run: If True, preview changes without executing
            settings: Organizer settings (defaults to the global settings)

        Raises:
            InvalidTargetError: If the target is missing or not a directory
        """
        self.target_directory = Path(target_directory).expanduser().absolute()
        if not self.target_directory.is_dir():
            raise InvalidTargetError(
                "Provided path is not a directory or does not exist: "
                f"{self.target_directory}"
            )

        self.dry_run = dry_run
        self.settings = settings or default_settings
        self.move_log = MoveLog(dry_run=dry_run)

    @property
    def log_path(self) -> Path:
        """Location of the move log inside the target directory."""
        return self.target_directory / self.settings.log_filename

    def _is_log_file(self, entry: Path) -> bool:
        return entry.name.lower() == self.settings.log_filename.lower()

    def organize(self) -> OrganizationResult:
        """
        Organize all top-level files of the target directory.

        Returns:
            Organization result with statistics
        """
        logger.info(
            f"Organizing {self.target_directory} "
            f"({'DRY RUN' if self.dry_run else 'LIVE'})"
        )

        result = OrganizationResult(
            target_directory=self.target_directory, dry_run=self.dry_run
        )
        self.move_log = MoveLog(dry_run=self.dry_run)

        # Destinations claimed earlier in this run
        reserved: Set[Path] = set()
        announced_dirs: Set[Path] = set()
        # Category folder paths occupied by a regular file
        blocked_dirs: Set[Path] = set()

        for entry in sorted(self.target_directory.iterdir()):
            if entry.is_dir() or self._is_log_file(entry):
                result.skipped += 1
                continue

            result.total_files += 1
            record = self._plan_move(entry, reserved)

            if self.dry_run:
                self._preview_move(entry, record, announced_dirs, result)
                continue

            category_dir = record.target_path.parent
            if category_dir in blocked_dirs:
                logger.debug(f"Skipping {entry.name}: {category_dir.name} is blocked")
                self._mark_failed(record, result, "category folder is blocked by a file")
                continue

            try:
                self._apply_move(entry, record, result)
                result.moved += 1
            except NotADirectoryError as e:
                blocked_dirs.add(category_dir)
                logger.error(f"Cannot create category folder {category_dir.name}: {e}")
                self._mark_failed(record, result, str(e))
                result.errors.append(
                    f"Cannot create category folder {category_dir.name}: {e}"
                )
            except OSError as e:
                logger.error(f"Failed to move {entry.name}: {e}")
                self._mark_failed(record, result, str(e))
                result.errors.append(f"Failed to move {entry.name}: {e}")

        result.records = list(self.move_log.records)

        if not self.dry_run:
            self._write_log(result)

        logger.info(
            f"Processed {result.total_files} files: {result.moved} moved, "
            f"{result.failed} failed"
        )
        return result

    def _plan_move(self, entry: Path, reserved: Set[Path]) -> MoveRecord:
        """Categorize a file, claim its destination and log the move."""
        category = categorize(entry.name)
        category_dir = self.target_directory / category.value

        target_path = resolve_unique_destination(category_dir, entry.name, reserved)
        reserved.add(target_path)

        return self.move_log.add_record(
            source_path=entry,
            target_path=target_path,
            category=category.value,
        )

    def _preview_move(
        self,
        entry: Path,
        record: MoveRecord,
        announced_dirs: Set[Path],
        result: OrganizationResult,
    ) -> None:
        """Report a planned move without touching the filesystem."""
        category_dir = record.target_path.parent
        if not category_dir.exists() and category_dir not in announced_dirs:
            announced_dirs.add(category_dir)
            result.created_directories.append(category_dir)
            logger.debug(f"[DRY RUN] Would create directory {category_dir}")

        logger.debug(
            f"[DRY RUN] Would move {entry.name} → "
            f"{record.category}/{record.target_path.name}"
        )

    def _apply_move(
        self, entry: Path, record: MoveRecord, result: OrganizationResult
    ) -> None:
        """
        Create the category folder if needed and move the file.

        Raises:
            NotADirectoryError: If a file occupies the category folder path
            OSError: If the folder cannot be created or the move fails
        """
        category_dir = record.target_path.parent
        if category_dir.exists() and not category_dir.is_dir():
            raise NotADirectoryError(f"A file named {category_dir.name} is in the way")

        if not category_dir.is_dir():
            category_dir.mkdir(parents=True, exist_ok=True)
            result.created_directories.append(category_dir)
            logger.debug(f"Created directory {category_dir}")

        if record.target_path.exists():
            raise FileExistsError(f"Destination already exists: {record.target_path}")

        shutil.move(str(entry), str(record.target_path))
        record.status = MoveStatus.MOVED
        logger.debug(f"Moved {entry} → {record.target_path}")

    @staticmethod
    def _mark_failed(
        record: MoveRecord, result: OrganizationResult, message: str
    ) -> None:
        record.status = MoveStatus.FAILED
        record.error_message = message
        result.failed += 1

    def _write_log(self, result: OrganizationResult) -> None:
        """Write the move log; a failure is reported but not fatal."""
        try:
            self.move_log.save(self.log_path, self.settings.log_timestamp_format)
            result.log_path = self.log_path
        except OSError as e:
            logger.error(f"Failed to write log {self.log_path}: {e}")
            result.errors.append(f"Failed to write log: {e}")
