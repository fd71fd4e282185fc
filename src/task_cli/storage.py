"""Flat-file storage for Task CLI: one comma-separated line per task."""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .errors import MalformedRecord, StorageReadFailure, StorageWriteFailure
from .factory import create_task
from .task import Task, TaskKind, kind_label

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","
MIN_FIELDS = 5
PRIORITY_RE = re.compile(r"[+-]?[0-9]+")


class TaskLineFormat:
    """Handles conversion between Task objects and storage lines.

    Layout: ``kind,title,description,deadline,priority[,extra]``. Fields are
    written verbatim; a comma inside a field will split it on the next load.
    """

    @staticmethod
    def to_line(task: Task, include_extra: bool = True) -> str:
        """Encode a task as a single line (without trailing newline).

        Args:
            task: Task to encode
            include_extra: Append the project/category as a sixth field. When
                False the legacy five-field layout is produced and the extra
                value is lost on reload.
        """
        fields = task.to_fields()
        if not include_extra:
            fields = fields[:MIN_FIELDS]
        return FIELD_SEPARATOR.join(str(value) for value in fields)

    @staticmethod
    def parse_line(line: str) -> Task:
        """Decode a storage line into a Task.

        Raises:
            MalformedRecord: If the line is blank, has fewer than five fields,
                a non-integer priority or an unknown kind.
        """
        if not line.strip():
            raise MalformedRecord(line, "Blank line", blank=True)

        parts = [part.strip() for part in line.rstrip("\r\n").split(FIELD_SEPARATOR)]
        if len(parts) < MIN_FIELDS:
            raise MalformedRecord(line, f"Expected at least {MIN_FIELDS} fields, got {len(parts)}")

        label, title, description, deadline, raw_priority = parts[:MIN_FIELDS]
        if not PRIORITY_RE.fullmatch(raw_priority):
            raise MalformedRecord(line, f"Invalid priority value {raw_priority!r}")
        priority = int(raw_priority)

        kind = TaskKind.from_label(label, legacy=True)
        if kind is None:
            raise MalformedRecord(line, f"Invalid task type {label!r}")

        extra = parts[MIN_FIELDS] if len(parts) > MIN_FIELDS else ""
        return create_task(kind_label(kind), title, description, deadline, priority, extra)

    @classmethod
    def from_line(cls, line: str) -> Optional[Task]:
        """Decode a storage line, returning None for lines that should be skipped."""
        try:
            return cls.parse_line(line)
        except MalformedRecord as e:
            if not e.blank:
                logger.warning(f"Skipping invalid line: {e}")
            return None


class TaskFile:
    """The plain-text file holding the persisted tasks."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def exists(self) -> bool:
        return self.path.exists()

    def read_lines(self) -> List[str]:
        """Read all lines from the file.

        Raises:
            StorageReadFailure: If the file cannot be read or decoded
        """
        try:
            with open(self.path, "r", encoding="utf-8", newline="\n") as f:
                # Records end with "\n" only; other Unicode line breaks are field data
                return [line.rstrip("\r\n") for line in f]
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadFailure(self.path, e) from e

    def write_lines(self, lines: Iterable[str]) -> None:
        """Overwrite the file, one line per entry.

        Raises:
            StorageWriteFailure: If the file or its directory cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8", newline="\n") as f:
                for line in lines:
                    f.write(line + "\n")
        except OSError as e:
            raise StorageWriteFailure(self.path, e) from e

    def __repr__(self) -> str:
        return f"TaskFile({str(self.path)!r})"
