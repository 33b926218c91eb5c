"""Runtime configuration loaded from the environment."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

# Default data directory (repository root / data)
DATA_DIR = Path(__file__).parent.parent.parent / "data"

DB_FILENAME = "ironlog.db"
DEFAULT_WINDOW_HOURS = 12.0
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Settings:
    """Process-wide settings.

    Every field can be overridden with an ``IRONLOG_*`` environment variable.
    """

    data_dir: Path = DATA_DIR
    db_path: Path | None = None
    window_hours: float = DEFAULT_WINDOW_HOURS
    log_level: str = "INFO"

    @property
    def database_path(self) -> Path:
        """Resolved path of the SQLite database file."""
        if self.db_path is not None:
            return self.db_path
        return self.data_dir / DB_FILENAME

    @classmethod
    def from_env(cls, environ: dict | None = None) -> "Settings":
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ

        data_dir = Path(env["IRONLOG_DATA_DIR"]) if env.get("IRONLOG_DATA_DIR") else DATA_DIR
        db_path = Path(env["IRONLOG_DB_PATH"]) if env.get("IRONLOG_DB_PATH") else None

        window = env.get("IRONLOG_WINDOW_HOURS")
        try:
            window_hours = float(window) if window else DEFAULT_WINDOW_HOURS
        except ValueError:
            raise ValueError(f"IRONLOG_WINDOW_HOURS must be a number, got {window!r}") from None
        if window_hours <= 0:
            raise ValueError("IRONLOG_WINDOW_HOURS must be positive")

        return cls(
            data_dir=data_dir,
            db_path=db_path,
            window_hours=window_hours,
            log_level=env.get("IRONLOG_LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
