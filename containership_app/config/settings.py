"""
Basic settings and logging configuration for the containership app.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    project_root: Path
    data_dir: Path
    log_path: Path

    @classmethod
    def default(cls) -> "Settings":
        """Create default settings based on the current file location."""
        project_root = Path(__file__).resolve().parents[2]
        data_dir = project_root / "containership_app_data"
        data_dir.mkdir(exist_ok=True)
        log_path = data_dir / "containership.log"
        return cls(project_root=project_root, data_dir=data_dir, log_path=log_path)


def init_logging(settings: Settings, level: int = logging.INFO) -> None:
    """Configure basic logging to console and a log file."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(settings.log_path, encoding="utf-8"),
        ],
    )

    logging.getLogger(__name__).info("Logging initialized. Log file at %s", settings.log_path)
