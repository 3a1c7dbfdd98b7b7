"""Run settings, optionally loaded from a YAML file.

Example `swamd.yaml`:

    path: ./internal/handlers
    output: docs/api_spec.md
    lang: go
    exclude_dirs: [.git, vendor, testdata]
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from swamd.errors import ConfigError
from swamd.parser.comments import LANGUAGES

DEFAULT_OUTPUT = "api_spec.md"
DEFAULT_EXCLUDE_DIRS = [".git", "vendor", "node_modules"]


class Settings(BaseModel):
    """Where to look, what to look for and where to write."""

    model_config = ConfigDict(extra="forbid")

    path: str = "."
    output: str = DEFAULT_OUTPUT
    lang: str = "go"
    exclude_dirs: list[str] = DEFAULT_EXCLUDE_DIRS

    @field_validator("lang")
    @classmethod
    def _known_language(cls, value: str) -> str:
        if value not in LANGUAGES:
            raise ValueError(f"unsupported language {value!r}")
        return value


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from a YAML file, or return the defaults."""
    if config_path is None:
        return Settings()

    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config file {config_path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {config_path}: {e}") from e

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping, got {type(data).__name__}")

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid settings in {config_path}: {e}") from e
