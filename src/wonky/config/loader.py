"""
Configuration loader for wonky
"""

import logging
import os
from dataclasses import MISSING, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..utils.errors import ConfigurationError
from .models import (
    IndicatorConfig,
    MeterConfig,
    SeparatorConfig,
    Settings,
    WidgetConfig,
    WonkyConfig,
)

logger = logging.getLogger(__name__)

# Maximum config file size (1MB should be plenty for YAML configs)
MAX_CONFIG_SIZE = 1024 * 1024

# Discriminator values, including the legacy "seperator" spelling
WIDGET_TYPES = {
    "meter": MeterConfig,
    "indicator": IndicatorConfig,
    "separator": SeparatorConfig,
    "seperator": SeparatorConfig,
}

# Integer fields that must not be negative
NON_NEGATIVE_FIELDS = ("frequency", "theme")


def default_config_path() -> Path:
    """Return $XDG_CONFIG_HOME/wonky/config.yaml (or ~/.config/wonky/config.yaml)."""
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base).expanduser() / "wonky" / "config.yaml"


class ConfigLoader:
    """Loads and validates YAML configuration files"""

    def __init__(self) -> None:
        self.warnings: List[str] = []

    def load(self, config_path: Optional[Union[str, Path]] = None) -> WonkyConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML configuration file (default location if None)

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If the file is missing, unreadable, too large
                or does not match the schema
        """
        if config_path is None:
            config_path = default_config_path()

        # Expand user path and resolve to absolute path
        resolved_path = Path(config_path).expanduser().resolve()

        self._validate_config_path(resolved_path)

        # Check file size before parsing
        file_size = resolved_path.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            raise ConfigurationError(
                f"Configuration file too large: {file_size} bytes "
                f"(maximum {MAX_CONFIG_SIZE} bytes)",
                resolved_path,
            )

        try:
            with open(resolved_path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}", resolved_path)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file: {e}", resolved_path)

        config = self.parse(raw, source=resolved_path)
        logger.info(f"Loaded configuration from {resolved_path} ({len(config.widgets)} widgets)")
        return config

    def parse(self, raw: Any, source: Any = None) -> WonkyConfig:
        """
        Validate an already-parsed document and build configuration records.

        Args:
            raw: Document as returned by yaml.safe_load
            source: Path reported in error messages

        Returns:
            Validated configuration
        """
        self.warnings = []

        if not isinstance(raw, dict):
            raise ConfigurationError("Configuration must be a mapping", source)

        for key in raw:
            if key not in ("widgets", "settings"):
                self._warn(f"Unknown top-level key: {key}")

        widgets = raw.get("widgets")
        if not isinstance(widgets, list) or not widgets:
            raise ConfigurationError("'widgets' must be a non-empty list", source)

        records = tuple(
            self._build_widget(index, entry, source) for index, entry in enumerate(widgets)
        )

        settings_raw = raw.get("settings")
        if settings_raw is None:
            settings_raw = {}
        if not isinstance(settings_raw, dict):
            raise ConfigurationError("'settings' must be a mapping", source)
        settings = self._build_record(Settings, settings_raw, "settings", source)

        return WonkyConfig(widgets=records, settings=settings)

    def _validate_config_path(self, config_path: Path) -> None:
        """
        Validate that the configuration file path can be loaded.

        Args:
            config_path: Resolved absolute path to config file

        Raises:
            ConfigurationError: If path is missing or not a regular file
        """
        if not config_path.exists():
            raise ConfigurationError("Configuration file not found", config_path)

        if config_path.is_dir():
            raise ConfigurationError("Path is a directory, not a file", config_path)

        if config_path.suffix.lower() not in [".yaml", ".yml"]:
            logger.warning(
                f"Configuration file has unexpected extension: {config_path.suffix}. "
                f"Expected .yaml or .yml"
            )

        logger.debug(f"Configuration path validated: {config_path}")

    def _build_widget(self, index: int, entry: Any, source: Any) -> WidgetConfig:
        """Build the configuration record for one widget entry"""
        where = f"widget {index + 1}"
        if not isinstance(entry, dict):
            raise ConfigurationError(f"{where} must be a mapping", source)

        widget_type = entry.get("type")
        if not isinstance(widget_type, str):
            raise ConfigurationError(f"{where} is missing 'type'", source)

        record_class = WIDGET_TYPES.get(widget_type.lower())
        if record_class is None:
            raise ConfigurationError(
                f"{where} has unknown type {widget_type!r} "
                f"(expected meter, indicator or separator)",
                source,
            )

        options = {key: value for key, value in entry.items() if key != "type"}
        return self._build_record(record_class, options, f"{where} ({widget_type})", source)

    def _build_record(self, record_class: type, options: Dict[str, Any], where: str, source: Any):
        """Check options against the record's fields and apply defaults"""
        known = {f.name: f for f in fields(record_class)}

        for key in options:
            if key not in known:
                self._warn(f"Unknown key in {where}: {key}")

        values = {}
        for name, field in known.items():
            if name not in options:
                if field.default is MISSING:
                    raise ConfigurationError(f"{where} requires '{name}'", source)
                continue

            value = options[name]
            if not _matches(value, field.type):
                raise ConfigurationError(
                    f"{where}: '{name}' must be {_describe(field.type)}, got {value!r}", source
                )
            if name in NON_NEGATIVE_FIELDS and value < 0:
                raise ConfigurationError(f"{where}: '{name}' must not be negative", source)
            values[name] = value

        return record_class(**values)

    def _warn(self, message: str) -> None:
        self.warnings.append(message)
        logger.warning(message)


def _matches(value: Any, annotation: Any) -> bool:
    if annotation is bool:
        return isinstance(value, bool)
    if annotation is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if annotation is str:
        return isinstance(value, str)
    if annotation == Optional[str]:
        return value is None or isinstance(value, str)
    return True


def _describe(annotation: Any) -> str:
    if annotation is bool:
        return "true or false"
    if annotation is int:
        return "an integer"
    if annotation == Optional[str]:
        return "a string or null"
    return "a string"
