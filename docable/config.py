"""Configuration loading for docable (.docable.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .source_scanner import DEFAULT_SUFFIXES

CONFIG_FILENAME = ".docable.yml"

POLICY_HALT = "halt"
POLICY_CONTINUE = "continue"
FAILURE_POLICIES = (POLICY_HALT, POLICY_CONTINUE)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class OutputConfig:
    """Where extracted members are written."""

    json_path: Optional[Path] = None
    html_path: Optional[Path] = None
    indent: int = 2


@dataclass
class DocableConfig:
    """Represents the settings defined in .docable.yml."""

    root: Path
    inputs: List[str] = field(default_factory=list)
    suffixes: List[str] = field(default_factory=lambda: list(DEFAULT_SUFFIXES))
    exclude_paths: List[str] = field(default_factory=list)
    on_failure: str = POLICY_HALT
    output: OutputConfig = field(default_factory=OutputConfig)
    templates_dir: Optional[Path] = None


def load_config(config_path: Path) -> DocableConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DocableConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    inputs = [str(root / item) for item in _as_str_list(data.get("inputs"))]

    suffixes = _as_str_list(data.get("suffixes")) or list(DEFAULT_SUFFIXES)
    suffixes = [suffix if suffix.startswith(".") else f".{suffix}" for suffix in suffixes]

    on_failure = (_as_str(data.get("on_failure")) or POLICY_HALT).strip().lower()
    if on_failure not in FAILURE_POLICIES:
        choices = ", ".join(FAILURE_POLICIES)
        raise ConfigError(f"on_failure must be one of: {choices} (got {on_failure!r})")

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    if output_data:
        json_path = _as_str(output_data.get("json"))
        html_path = _as_str(output_data.get("html"))
        output.json_path = root / json_path if json_path else None
        output.html_path = root / html_path if html_path else None
        indent = _as_int(output_data.get("indent"))
        if indent is not None:
            if indent < 0:
                raise ConfigError("output.indent must not be negative")
            output.indent = indent

    templates_dir_str = _as_str(data.get("templates_dir"))
    templates_dir = root / templates_dir_str if templates_dir_str else None

    return DocableConfig(
        root=root,
        inputs=inputs,
        suffixes=suffixes,
        exclude_paths=_as_str_list(data.get("exclude_paths")),
        on_failure=on_failure,
        output=output,
        templates_dir=templates_dir,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DocableConfig",
    "FAILURE_POLICIES",
    "OutputConfig",
    "POLICY_CONTINUE",
    "POLICY_HALT",
    "load_config",
]
