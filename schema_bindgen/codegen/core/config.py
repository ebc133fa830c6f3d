"""
Configuration management for bindings generation.

Handles loading and merging configuration from JSON files,
providing per-target defaults and validation for generator settings.
"""

import json
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...logging_config import get_logger
from .errors import GeneratorError

logger = get_logger(__name__)


class ConfigError(GeneratorError):
    """Exception raised for configuration-related errors."""

    pass


class OverwriteType(Enum):
    """What to do when the output directory is not empty."""

    NONE = "none"  # Abort generation
    FULL = "full"  # Delete the existing tree first
    MERGE = "merge"  # Write alongside existing files


class OutputType(Enum):
    """Construct emitted for classes, where the target supports both."""

    CLASS = "class"
    INTERFACE = "interface"


def _coerce_enum(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        valid = ", ".join(member.value for member in enum_cls)
        raise ConfigError(
            f"Invalid {enum_cls.__name__} '{value}'. Expected one of: {valid}"
        )


@dataclass
class GeneratorConfig:
    """Configuration for a bindings generation run."""

    # Target selection
    target: str = "typescript"
    packages: List[str] = field(default_factory=list)

    # Output settings
    output_dir: Optional[str] = None
    overwrite: OverwriteType = OverwriteType.NONE
    output_type: OutputType = OutputType.CLASS
    strip_prefix: str = ""

    # Naming settings
    field_case: str = "original"  # original, snake, camel, pascal

    # Additional metadata
    add_comments: bool = True

    # Custom settings (target-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.overwrite = _coerce_enum(OverwriteType, self.overwrite)
        self.output_type = _coerce_enum(OutputType, self.output_type)
        if isinstance(self.packages, str):
            self.packages = [self.packages]
        else:
            self.packages = list(self.packages)

    @property
    def output_path(self) -> Optional[Path]:
        return Path(self.output_dir) if self.output_dir else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "target": self.target,
            "packages": list(self.packages),
            "output_dir": self.output_dir,
            "overwrite": self.overwrite.value,
            "output_type": self.output_type.value,
            "strip_prefix": self.strip_prefix,
            "field_case": self.field_case,
            "add_comments": self.add_comments,
            **self.custom,
        }


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported targets."""
        self._configs["typescript"] = {
            "target": "typescript",
            "field_case": "original",
            "output_type": "class",
            "add_comments": True,
        }

        self._configs["python"] = {
            "target": "python",
            "field_case": "snake",
            "output_type": "class",
            "add_comments": True,
        }

    def get_config(
        self,
        target: Optional[str] = None,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a target.

        File values override the target defaults; ``custom_config`` overrides
        both. The target may come from any of the three sources.

        Args:
            target: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        file_config = self._load_config_file(config_file) if config_file else {}
        overrides = dict(custom_config or {})

        resolved_target = (
            overrides.get("target") or target or file_config.get("target") or "typescript"
        ).lower()

        base_config = self._configs.get(resolved_target, {}).copy()
        base_config.update(file_config)
        base_config.update(overrides)
        base_config["target"] = resolved_target

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys land in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_targets(self) -> List[str]:
        """Get list of targets with defaults."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        valid_cases = {"original", "snake", "camel", "pascal"}
        if config.field_case not in valid_cases:
            warnings.append(f"Invalid field_case: {config.field_case}")

        if not config.packages:
            warnings.append("No packages configured - nothing will be generated")

        for package in config.packages:
            if not all(part.isidentifier() for part in package.split(".")):
                warnings.append(f"Invalid package name: {package}")

        if config.strip_prefix and not config.strip_prefix.endswith("."):
            warnings.append(
                f"strip_prefix '{config.strip_prefix}' should end with '.'"
            )

        if config.target == "python" and config.output_type == OutputType.INTERFACE:
            warnings.append("Python bindings have no interfaces - generating classes")

        return warnings


def load_config(
    target: Optional[str] = None,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        target: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the target
    """
    return ConfigManager().get_config(target, custom_config, config_file)
