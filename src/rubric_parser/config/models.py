"""Configuration data models."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..utils.logging import level_from_name


@dataclass
class LoggingSettings:
    """Logging output settings."""

    level: str = "WARNING"
    file: Path | None = None

    @property
    def numeric_level(self) -> int:
        return level_from_name(self.level)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LoggingSettings":
        level = str(data.get("level", "WARNING"))
        level_from_name(level)
        return cls(
            level=level,
            file=Path(data["file"]) if data.get("file") else None,
        )


@dataclass
class RenderSettings:
    """Presentation options for the rubric renderers."""

    empty_cell: str = "-"
    show_declared_total: bool = True
    rubric_heading: str = "Grading Rubric:"
    instructions_heading: str = "Assignment Instructions:"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RenderSettings":
        return cls(
            empty_cell=str(data.get("empty_cell", "-")),
            show_declared_total=bool(data.get("show_declared_total", True)),
            rubric_heading=str(data.get("rubric_heading", "Grading Rubric:")),
            instructions_heading=str(
                data.get("instructions_heading", "Assignment Instructions:")
            ),
        )


@dataclass
class AppConfig:
    """Complete tool configuration."""

    logging: LoggingSettings = field(default_factory=LoggingSettings)
    render: RenderSettings = field(default_factory=RenderSettings)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "AppConfig":
        data = data or {}
        for section in ("logging", "render"):
            if not isinstance(data.get(section) or {}, dict):
                raise ValueError(f"Config section '{section}' must be a mapping")

        return cls(
            logging=LoggingSettings.from_dict(data.get("logging") or {}),
            render=RenderSettings.from_dict(data.get("render") or {}),
        )
