import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from complexity_cli.core.constants import (
    DEFAULT_SENTINEL,
    OUTPUT_DETAILED,
    OUTPUT_FORMATS,
)
from complexity_cli.core.exceptions import ConfigurationError

# Configuration defaults - all constants at the top
CONFIG_FILENAME = "complexity_cli_config.json"
DEFAULT_OUTPUT_FORMAT = OUTPUT_DETAILED
DEFAULT_MAX_CODE_WIDTH = 60
SHOW_REASONS_DEFAULT = True
SHOW_BANNER_DEFAULT = True
SHOW_SUMMARY_DEFAULT = True


@dataclass
class DisplayConfig:
    """Terminal rendering configuration."""

    show_reasons: bool = SHOW_REASONS_DEFAULT
    show_banner: bool = SHOW_BANNER_DEFAULT
    show_summary: bool = SHOW_SUMMARY_DEFAULT
    max_code_width: int = DEFAULT_MAX_CODE_WIDTH  # Table mode only


@dataclass
class AnalyzerConfig:
    """Main configuration class for Complexity CLI."""

    sentinel: str = DEFAULT_SENTINEL
    output_format: str = DEFAULT_OUTPUT_FORMAT
    debug: bool = False
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unknown output format '{self.output_format}'. "
                f"Expected one of: {', '.join(OUTPUT_FORMATS)}"
            )
        if not self.sentinel:
            raise ConfigurationError("Input sentinel cannot be empty")
        if self.display.max_code_width < 10:
            raise ConfigurationError("max_code_width must be at least 10")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalyzerConfig":
        """Create config from dictionary."""
        config_data = data.copy()

        # Map JSON keys to config fields
        field_mapping = {
            "input_sentinel": "sentinel",
            "default_format": "output_format",
            "show_reasons": "display.show_reasons",
            "show_banner": "display.show_banner",
            "show_summary": "display.show_summary",
            "max_code_width": "display.max_code_width",
        }

        # Process mapped fields
        for json_key, config_key in field_mapping.items():
            if json_key in config_data:
                value = config_data.pop(json_key)
                if "." in config_key:  # Nested field
                    parent, child = config_key.split(".", 1)
                    if parent not in config_data:
                        config_data[parent] = {}
                    config_data[parent][child] = value
                else:
                    config_data[config_key] = value

        if "display" in config_data and isinstance(config_data["display"], dict):
            try:
                config_data["display"] = DisplayConfig(**config_data["display"])
            except TypeError as e:
                raise ConfigurationError(f"Invalid display settings: {e}") from e

        try:
            return cls(**config_data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return asdict(self)


def load_config_file(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from file."""
    paths = []

    if config_path:
        if not Path(config_path).exists():
            raise ConfigurationError(f"Config file not found: {config_path}")
        paths.append(Path(config_path))

    paths.extend(
        [
            Path.cwd() / CONFIG_FILENAME,
            Path.home() / f".{CONFIG_FILENAME}",
        ]
    )

    for path in paths:
        if path.exists():
            try:
                with open(path, "r") as f:
                    return json.load(f)
            except (json.JSONDecodeError, IOError):
                continue

    return {}
