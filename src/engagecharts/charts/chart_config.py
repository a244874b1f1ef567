"""
Chart config persistence (platformdirs + JSON).

Persisted items (schema v1):
- data_dir: optional directory holding the chart CSVs
- chart_states: list of ChartState dicts

Behavior:
- If config file missing or unreadable -> defaults are used
- If schema_version mismatches:
  - default: reset to defaults
  - optional: keep loaded but update version
- Unknown keys in loaded JSON are ignored with warnings
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from platformdirs import user_config_dir

from engagecharts.charts.chart_state import ChartState, default_chart_states
from engagecharts.utils.logging import get_logger

logger = get_logger(__name__)

# Increment when you make a breaking change to the on-disk JSON schema.
SCHEMA_VERSION: int = 1

APP_NAME = "engagecharts"
CONFIG_FILENAME = "chart_config.json"


@dataclass
class ChartConfigData:
    """
    JSON-serializable config payload.

    An empty chart_states list means "use default_chart_states()".
    """
    schema_version: int = SCHEMA_VERSION
    data_dir: Optional[str] = None
    chart_states: list[Dict[str, Any]] = field(default_factory=list)

    def to_json_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "schema_version": self.schema_version,
            "data_dir": self.data_dir,
            "chart_states": self.chart_states,
        }

    @classmethod
    def from_json_dict(cls, d: Dict[str, Any]) -> "ChartConfigData":
        """
        Tolerant loader:
        - ignores unknown keys
        - tolerates partially missing values
        """
        schema_version = int(d.get("schema_version", -1))

        data_dir = d.get("data_dir")
        if data_dir is not None and not isinstance(data_dir, str):
            logger.warning("data_dir is not a string, ignoring")
            data_dir = None

        chart_states: list[Dict[str, Any]] = []
        raw = d.get("chart_states", [])
        if isinstance(raw, list):
            chart_states = [s for s in raw if isinstance(s, dict)]
            if len(chart_states) != len(raw):
                logger.warning("Dropped non-dict entries from chart_states")
        else:
            logger.warning("chart_states is not a list, using empty list")

        known_keys = {"schema_version", "data_dir", "chart_states"}
        for key in d.keys():
            if key not in known_keys:
                logger.warning(f"Unknown key '{key}' in chart config, ignoring")

        return cls(schema_version=schema_version, data_dir=data_dir, chart_states=chart_states)


class ChartConfig:
    """
    Manager for loading/saving ChartConfigData to disk.
    """

    def __init__(self, *, path: Path, data: Optional[ChartConfigData] = None):
        self.path = path
        self.data = data if data is not None else ChartConfigData()

    @staticmethod
    def default_config_path(
        app_name: str = APP_NAME,
        filename: str = CONFIG_FILENAME,
        app_author: str | None = None,
    ) -> Path:
        """
        Determine OS-appropriate per-user config path.

        macOS:   ~/Library/Application Support/engagecharts/chart_config.json
        Linux:   ~/.config/engagecharts/chart_config.json
        Windows: %APPDATA%\\engagecharts\\chart_config.json
        """
        return Path(user_config_dir(app_name, app_author)) / filename

    @classmethod
    def load(
        cls,
        *,
        config_path: Optional[Path] = None,
        app_name: str = APP_NAME,
        filename: str = CONFIG_FILENAME,
        schema_version: int = SCHEMA_VERSION,
        reset_on_version_mismatch: bool = True,
    ) -> "ChartConfig":
        """
        Load config from disk. Never raises.

        If file doesn't exist or is unreadable -> defaults.
        If schema mismatch:
          - reset_on_version_mismatch=True -> defaults
          - else -> keep loaded but overwrite schema_version
        """
        path = config_path or cls.default_config_path(app_name=app_name, filename=filename)
        default_data = ChartConfigData(schema_version=schema_version)

        try:
            parsed = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.debug(f"Chart config file not found at {path}, using defaults")
            return cls(path=path, data=default_data)
        except json.JSONDecodeError as e:
            logger.warning(f"Chart config file at {path} is not valid JSON: {e}, using defaults")
            return cls(path=path, data=default_data)
        except OSError as e:
            logger.warning(f"Error reading chart config from {path}: {e}, using defaults")
            return cls(path=path, data=default_data)

        if not isinstance(parsed, dict):
            logger.warning(f"Chart config file at {path} does not contain a dict, using defaults")
            return cls(path=path, data=default_data)

        loaded = ChartConfigData.from_json_dict(parsed)
        if loaded.schema_version != schema_version:
            if reset_on_version_mismatch:
                logger.warning(
                    f"Chart config schema version mismatch: loaded={loaded.schema_version}, "
                    f"expected={schema_version}, resetting to defaults"
                )
                return cls(path=path, data=default_data)
            loaded.schema_version = schema_version
        return cls(path=path, data=loaded)

    def save(self) -> None:
        """Write config to disk."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self.data.to_json_dict(), indent=2), encoding="utf-8")
            logger.info(f"Saved chart config to {self.path}")
        except OSError as e:
            logger.error(f"Error saving chart config to {self.path}: {e}")
            raise

    def get_data_dir(self) -> Optional[Path]:
        """Configured data directory, or None for the package default."""
        return Path(self.data.data_dir) if self.data.data_dir else None

    def set_data_dir(self, data_dir: Optional[Path]) -> None:
        self.data.data_dir = str(data_dir) if data_dir is not None else None

    def get_chart_states(self) -> list[ChartState]:
        """ChartState objects from config; defaults when none are stored or none are valid."""
        result = []
        for state_dict in self.data.chart_states:
            try:
                result.append(ChartState.from_dict(state_dict))
            except (ValueError, TypeError) as e:
                logger.warning(f"Error deserializing ChartState from config: {e}")
        return result or default_chart_states()

    def set_chart_states(self, chart_states: list[ChartState]) -> None:
        self.data.chart_states = [cs.to_dict() for cs in chart_states]
