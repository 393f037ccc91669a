"""Runtime settings read from the environment (and an optional ``.env`` file)."""
from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from .parsers import DEFAULT_YAML_MIN_VERSION, YamlLoaderConfig, parse_version

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    strict: bool = False
    yaml_min_version: tuple = DEFAULT_YAML_MIN_VERSION

    def yaml_config(self) -> YamlLoaderConfig:
        return YamlLoaderConfig(minimum_version=self.yaml_min_version)


def load_settings() -> Settings:
    load_dotenv()
    min_version = os.getenv("DEP12_YAML_MIN_VERSION")
    return Settings(
        log_level=os.getenv("DEP12_LOG_LEVEL", "WARNING").upper(),
        strict=os.getenv("DEP12_STRICT", "").strip().lower() in _TRUE_VALUES,
        yaml_min_version=parse_version(min_version) if min_version else DEFAULT_YAML_MIN_VERSION,
    )
