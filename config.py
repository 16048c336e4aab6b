"""Configuration management for the sales tracker.

Reads configuration from ~/.config/sales-tracker.toml (or the path in
$SALES_TRACKER_CONFIG) and creates a default config if needed.
"""

import logging
import os
from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w

CONFIG_ENV_VAR = "SALES_TRACKER_CONFIG"


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    db_data_dir: Path
    db_filename: str
    log_level: str
    log_dir: Path
    busy_timeout: float = 5.0  # seconds SQLite waits on a locked database
    query_timeout: float = 30.0  # default per-operation deadline, 0 disables

    @property
    def db_path(self) -> Path:
        """Get the full database path (data_dir/filename)."""
        return self.db_data_dir / self.db_filename

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        base_dir = Path.home() / "data" / "sales-tracker"
        return cls(
            base_dir=base_dir,
            db_data_dir=base_dir / "db",
            db_filename="sales-tracker.db",
            log_level="INFO",
            log_dir=base_dir / "logs",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "sales-tracker.toml"


def get_migrations_dir() -> Path:
    """Get the path to the migrations directory.

    This is always relative to the code location, not configurable.
    """
    return Path(__file__).parent / "db" / "migrations"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.

    Raises:
        ValueError: If a timeout setting is negative or the log level is unknown.
    """
    config_path = get_config_path()

    if not config_path.exists():
        config = Config.default()
        _write_config(config, config_path)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    defaults = Config.default()
    base_dir = Path(data.get("base_dir", defaults.base_dir))

    db_config = data.get("database", {})
    db_data_dir = Path(db_config.get("data_dir", base_dir / "db"))
    db_filename = db_config.get("filename", defaults.db_filename)
    busy_timeout = float(db_config.get("busy_timeout", defaults.busy_timeout))
    query_timeout = float(db_config.get("query_timeout", defaults.query_timeout))

    if busy_timeout < 0 or query_timeout < 0:
        raise ValueError(f"Timeouts in {config_path} must not be negative")

    log_config = data.get("logging", {})
    log_level = str(log_config.get("level", defaults.log_level)).upper()
    if log_level not in logging.getLevelNamesMapping():
        raise ValueError(f"Unknown log level '{log_level}' in {config_path}")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    return Config(
        base_dir=base_dir,
        db_data_dir=db_data_dir,
        db_filename=db_filename,
        log_level=log_level,
        log_dir=log_dir,
        busy_timeout=busy_timeout,
        query_timeout=query_timeout,
    )


def _write_config(config: Config, config_path: Path) -> None:
    """Write config to ``config_path`` as TOML."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "database": {
            "data_dir": str(config.db_data_dir),
            "filename": config.db_filename,
            "busy_timeout": config.busy_timeout,
            "query_timeout": config.query_timeout,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
