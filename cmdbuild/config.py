"""
config.py

Responsibility: Describe where a build reads templates from and writes outputs to.

Defaults match the plugin layout:
- templates live in `<root>/src/commands` and end with `.template.md`
- outputs go to `<root>/commands` with the suffix replaced by `.md`
- include paths resolve against `<root>`

A YAML file may override any of the four layout keys. Nothing here is read from
the environment; callers pass a `BuildConfig` explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

DEFAULT_SOURCE_DIR = "src/commands"
DEFAULT_OUTPUT_DIR = "commands"
DEFAULT_TEMPLATE_SUFFIX = ".template.md"
DEFAULT_OUTPUT_SUFFIX = ".md"

_KEYS = ("source_dir", "output_dir", "template_suffix", "output_suffix")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class BuildConfig:
    """Options for a single build run."""

    plugin_root: Path
    source_dir: str = DEFAULT_SOURCE_DIR
    output_dir: str = DEFAULT_OUTPUT_DIR
    template_suffix: str = DEFAULT_TEMPLATE_SUFFIX
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX

    @property
    def source_path(self) -> Path:
        return self.plugin_root / self.source_dir

    @property
    def output_path(self) -> Path:
        return self.plugin_root / self.output_dir

    @property
    def base_path(self) -> Path:
        # Include paths are relative to the plugin root, not the template.
        return self.plugin_root


def default_config(plugin_root: str | Path) -> BuildConfig:
    return BuildConfig(plugin_root=Path(plugin_root).resolve())


def _parse_overrides(data: dict[str, Any]) -> dict[str, str]:
    unknown = sorted(str(k) for k in data if k not in _KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    out: dict[str, str] = {}
    for key in _KEYS:
        if key not in data or data[key] is None:
            continue
        value = data[key]
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"`{key}` must be a non-empty string.")
        out[key] = value.strip()
    return out


def load_config(config_path: str | Path, plugin_root: str | Path) -> BuildConfig:
    """
    Load a YAML config file and apply it on top of the defaults for `plugin_root`.

    Expected (all optional) keys:
    - source_dir: str
    - output_dir: str
    - template_suffix: str
    - output_suffix: str
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Config file does not exist: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {path}") from e
    if not isinstance(data, dict):
        raise ConfigError("Config must be a mapping/object at the top level.")

    config = replace(default_config(plugin_root), **_parse_overrides(data))
    if config.template_suffix == config.output_suffix:
        raise ConfigError("`template_suffix` and `output_suffix` must differ.")
    return config
