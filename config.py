"""Configuration management for Gastos.

Reads configuration from ~/.config/gastos.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import tomllib
import tomli_w


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    db_data_dir: Path
    db_filename: str
    log_level: str
    log_dir: Path
    sheets_enabled: bool = False
    sheets_id: str = ""
    sheets_tab: str = "Lancamentos"
    sheets_credentials_file: Optional[Path] = None
    refresh_interval: int = 8

    @property
    def db_path(self) -> Path:
        """Get the full database path (data_dir/filename)."""
        return self.db_data_dir / self.db_filename

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "gastos"
        return cls(
            base_dir=base_dir,
            db_data_dir=base_dir / "db",
            db_filename="gastos.db",
            log_level="INFO",
            log_dir=base_dir / "logs",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "gastos.toml"


def get_migrations_dir() -> Path:
    """Get the path to the migrations directory.

    This is always relative to the code location, not configurable.
    """
    return Path(__file__).parent / "db" / "migrations"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Args:
        config_path: Optional override for the config file location.

    Returns:
        Config object with loaded or default values.
    """
    config_path = config_path or get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config, config_path)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return _parse_config(data)


def _parse_config(data: dict) -> Config:
    """Build a Config from parsed TOML data, defaulting missing values."""
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "gastos"))

    db_config = data.get("database", {})
    db_data_dir = Path(db_config.get("data_dir", base_dir / "db"))
    db_filename = db_config.get("filename", "gastos.db")

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    sheets_config = data.get("sheets", {})
    credentials_file = sheets_config.get("credentials_file")

    dashboard_config = data.get("dashboard", {})

    return Config(
        base_dir=base_dir,
        db_data_dir=db_data_dir,
        db_filename=db_filename,
        log_level=log_level,
        log_dir=log_dir,
        sheets_enabled=sheets_config.get("enabled", False),
        sheets_id=sheets_config.get("spreadsheet_id", ""),
        sheets_tab=sheets_config.get("tab", "Lancamentos"),
        sheets_credentials_file=Path(credentials_file) if credentials_file else None,
        refresh_interval=int(dashboard_config.get("refresh_interval", 8)),
    )


def _write_config(config: Config, config_path: Path) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
        config_path: Destination file.
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "database": {
            "data_dir": str(config.db_data_dir),
            "filename": config.db_filename,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "sheets": {
            "enabled": config.sheets_enabled,
            "spreadsheet_id": config.sheets_id,
            "tab": config.sheets_tab,
            "credentials_file": (
                str(config.sheets_credentials_file)
                if config.sheets_credentials_file
                else ""
            ),
        },
        "dashboard": {
            "refresh_interval": config.refresh_interval,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
