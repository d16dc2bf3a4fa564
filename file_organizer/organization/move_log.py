"""
Move logging for organization runs.

Tracks every move decided during a run and writes the plain-text
organizer log that lists original and new paths.
"""

import logging
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

LOG_HEADER_PREFIX = "# File organizer log - "
LOG_SEPARATOR = " -> "


class MoveStatus(str, Enum):
    """Status of a single move."""

    PLANNED = "planned"
    MOVED = "moved"
    FAILED = "failed"


class MoveRecord(BaseModel):
    """A single file move in a run."""

    source_path: Path = Field(description="Original file path")
    target_path: Path = Field(description="Resolved destination path")
    category: str = Field(description="Category folder name")
    status: MoveStatus = Field(
        default=MoveStatus.PLANNED,
        description="Move status",
    )
    error_message: Optional[str] = Field(
        default=None, description="Error message if the move failed"
    )

    model_config = ConfigDict(use_enum_values=True)

    def to_log_line(self) -> str:
        """Render the record as an organizer.log line."""
        return f"{self.source_path}{LOG_SEPARATOR}{self.target_path}"


class MoveLog(BaseModel):
    """Ordered log of the moves decided during a run."""

    started_at: datetime = Field(
        default_factory=datetime.now,
        description="When the run started",
    )
    dry_run: bool = Field(default=False, description="Whether this was a dry run")
    records: List[MoveRecord] = Field(
        default_factory=list, description="Moves in directory order"
    )

    def add_record(
        self, source_path: Path, target_path: Path, category: str
    ) -> MoveRecord:
        """
        Append a move to the log.

        Args:
            source_path: Original file path
            target_path: Resolved destination path
            category: Category folder name

        Returns:
            Created record
        """
        record = MoveRecord(
            source_path=source_path,
            target_path=target_path,
            category=category,
        )
        self.records.append(record)
        return record

    def get_statistics(self) -> Dict[str, int]:
        """
        Get move statistics.

        Returns:
            Dictionary with record counts by status
        """
        stats = {
            "total": len(self.records),
            "planned": 0,
            "moved": 0,
            "failed": 0,
        }

        for record in self.records:
            status = MoveStatus(record.status).value
            stats[status] = stats.get(status, 0) + 1

        return stats

    def has_failures(self) -> bool:
        """Check if any move failed."""
        return any(r.status == MoveStatus.FAILED for r in self.records)

    def lines(self) -> List[str]:
        """Log lines for all records, in order."""
        return [record.to_log_line() for record in self.records]

    def save(
        self, log_path: Path, timestamp_format: str = "%Y-%m-%d %H:%M:%S"
    ) -> None:
        """
        Write the log file, replacing any previous one.

        The first line is a header with the generation timestamp, followed
        by one "original -> destination" line per record.

        Args:
            log_path: Path of the log file
            timestamp_format: strftime format for the header timestamp
        """
        generated_at = datetime.now().strftime(timestamp_format)

        with open(log_path, "w", encoding="utf-8") as f:
            f.write(f"{LOG_HEADER_PREFIX}{generated_at}\n")
            for line in self.lines():
                f.write(line + "\n")

        logger.info(f"Saved move log to {log_path}")

    @classmethod
    def load(
        cls, log_path: Path, timestamp_format: str = "%Y-%m-%d %H:%M:%S"
    ) -> "MoveLog":
        """
        Read a log file written by save().

        Status is not stored in the file, so loaded records are PLANNED.

        Args:
            log_path: Path of the log file
            timestamp_format: strftime format used for the header timestamp

        Returns:
            Loaded move log
        """
        move_log = cls()

        with open(log_path, "r", encoding="utf-8") as f:
            for raw in f:
                line = raw.rstrip("\n")
                if not line:
                    continue
                if line.startswith("#"):
                    if line.startswith(LOG_HEADER_PREFIX):
                        stamp = line[len(LOG_HEADER_PREFIX) :]
                        try:
                            move_log.started_at = datetime.strptime(
                                stamp, timestamp_format
                            )
                        except ValueError:
                            logger.debug(f"Unparseable log header: {line}")
                    continue

                source, sep, target = line.partition(LOG_SEPARATOR)
                if not sep:
                    logger.warning(f"Skipping malformed log line: {line}")
                    continue

                target_path = Path(target)
                move_log.add_record(
                    source_path=Path(source),
                    target_path=target_path,
                    category=target_path.parent.name,
                )

        return move_log
