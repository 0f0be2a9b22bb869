"""Loader for assignment instructions stored in content record files."""

import json
from pathlib import Path
from typing import Any

import yaml

from ..utils.logging import get_logger

logger = get_logger(__name__)


class InstructionsLoader:
    """Reads the raw instructions blob of an assignment.

    YAML and JSON files are treated as content records and their
    ``instructions`` field is returned; any other file is plain text.
    """

    def __init__(self, records_dir: Path | None = None):
        """Initialize the instructions loader.

        Args:
            records_dir: Directory relative paths are resolved against
        """
        self.records_dir = records_dir or Path(".")

    def load(self, record_file: str | Path) -> str:
        """Load the instructions text from a record file.

        Args:
            record_file: Path to a .yml/.yaml/.json record or a text file

        Returns:
            Raw instructions text

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If a record has no string ``instructions`` field
        """
        path = self._resolve_path(record_file)
        if not path.exists():
            raise FileNotFoundError(f"Instructions file not found: {path}")

        suffix = path.suffix.lower()
        if suffix in {".yml", ".yaml", ".json"}:
            return self._instructions_from_record(path, self._load_record(path))

        logger.debug(f"Reading plain-text instructions from {path}")
        return path.read_text(encoding="utf-8")

    def _resolve_path(self, file_path: str | Path) -> Path:
        """Resolve a record file path."""
        path = Path(file_path)
        if not path.is_absolute():
            path = self.records_dir / path
        return path

    def _load_record(self, path: Path) -> Any:
        """Load and parse a YAML or JSON record."""
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    def _instructions_from_record(self, path: Path, record: Any) -> str:
        if not isinstance(record, dict):
            raise ValueError(f"Content record must be a mapping: {path}")

        instructions = record.get("instructions")
        if not isinstance(instructions, str):
            raise ValueError(f"Content record has no 'instructions' text: {path}")
        return instructions
