"""
Configuration - Handles case folding configuration.

This module handles:
- Configuration dataclass with all options
- JSON configuration file support
- Command-line overrides
- Configuration validation
"""

import json
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from cobol_casefold.core.scanner import FoldCase
from cobol_casefold.exceptions import ConfigError


@dataclass
class Config:
    """
    Configuration for COBOL case folding.

    Attributes:
        fold_case: Target case for code (default: lowercase)
        input_path: Source file to read (None reads stdin)
        output_path: File to write (None writes stdout)
        report_file: Optional path for a JSON run report
        verbose: Print a run summary to stderr
        quiet: Suppress everything but errors on stderr
        log_level: Logging level
        log_file: Optional path to a log file
    """

    fold_case: FoldCase = FoldCase.LOWER
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    report_file: Optional[Path] = None

    # Output options
    verbose: bool = False
    quiet: bool = False
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        data = {}
        for key, value in asdict(self).items():
            if isinstance(value, Path):
                data[key] = str(value)
            elif isinstance(value, Enum):
                data[key] = value.value
            else:
                data[key] = value
        return data

    def save_to_file(self, path: Path) -> None:
        """Save configuration to JSON file."""
        path.write_text(json.dumps(self.to_dict(), indent=2))

    @classmethod
    def load_from_file(cls, path: Path) -> "Config":
        """Load configuration from JSON file."""
        try:
            data = json.loads(path.read_text())
        except (OSError, ValueError) as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must hold a JSON object")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        data = dict(data)

        for key in ("input_path", "output_path", "report_file", "log_file"):
            if data.get(key):
                data[key] = Path(data[key])

        if "fold_case" in data and isinstance(data["fold_case"], str):
            try:
                data["fold_case"] = FoldCase(data["fold_case"].lower())
            except ValueError as e:
                raise ConfigError(f"Invalid fold case: {data['fold_case']}") from e

        # Filter only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        return cls(**filtered_data)

    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.input_path is not None:
            if not self.input_path.exists():
                errors.append(f"Input file does not exist: {self.input_path}")
            elif not self.input_path.is_file():
                errors.append(f"Input path is not a file: {self.input_path}")

        if self.output_path is not None:
            if self.output_path.exists() and self.output_path.is_dir():
                errors.append(f"Output path is a directory: {self.output_path}")
            if self.input_path is not None and _same_file(self.input_path, self.output_path):
                errors.append(
                    f"Output file is the input file: {self.output_path} "
                    "(files are not rewritten in place)"
                )

        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.log_level}")

        return errors

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return len(self.validate()) == 0


def _same_file(a: Path, b: Path) -> bool:
    return a.resolve() == b.resolve()


def create_default_config() -> Config:
    """Create a configuration with default values."""
    return Config()


def merge_configs(base: Config, override: Config) -> Config:
    """
    Merge two configurations, with override taking precedence.

    Args:
        base: Base configuration
        override: Override configuration

    Returns:
        Merged configuration
    """
    base_dict = base.to_dict()
    override_dict = override.to_dict()

    # Only override non-default values from override
    merged = {}
    default = create_default_config().to_dict()

    for key in base_dict:
        if override_dict.get(key) != default.get(key):
            merged[key] = override_dict[key]
        else:
            merged[key] = base_dict[key]

    return Config.from_dict(merged)
