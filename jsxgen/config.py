"""Configuration loading for jsxgen (.jsxgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import DEFAULT_IMPORT_PREFIX

CONFIG_FILENAME = ".jsxgen.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class DefinitionsConfig:
    """Locations of the definition files, relative to ``root``."""

    root: Path
    components: str = "components.yml"
    assets: str = "assets.yml"
    content: str = "content.yml"
    index: str = "index.yml"
    views_dir: str = "views"

    @property
    def components_path(self) -> Path:
        return self.root / self.components

    @property
    def assets_path(self) -> Path:
        return self.root / self.assets

    @property
    def content_path(self) -> Path:
        return self.root / self.content

    @property
    def index_path(self) -> Path:
        return self.root / self.index

    @property
    def views_path(self) -> Path:
        return self.root / self.views_dir


@dataclass
class OutputConfig:
    """Where generated sources are written."""

    root: Path
    router: str = "router/Router.jsx"
    extension: str = ".jsx"

    @property
    def router_path(self) -> Path:
        return self.root / self.router


@dataclass
class RouterConfig:
    """Router assembly options."""

    import_prefix: str = DEFAULT_IMPORT_PREFIX
    strict: bool = False


@dataclass
class JsxGenConfig:
    """Represents the settings defined in .jsxgen.yml."""

    root: Path
    definitions: DefinitionsConfig
    output: OutputConfig
    router: RouterConfig = field(default_factory=RouterConfig)


def default_config(root: Path) -> JsxGenConfig:
    return JsxGenConfig(
        root=root,
        definitions=DefinitionsConfig(root=root / "protos"),
        output=OutputConfig(root=root / "src"),
    )


def load_config(config_path: Path) -> JsxGenConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()
    config = default_config(root)

    if not config_file.exists():
        return config

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    definitions_data = _as_dict(data.get("definitions"))
    if definitions_data:
        definitions = config.definitions
        definitions_root = _as_str(definitions_data.get("root"))
        if definitions_root:
            definitions.root = root / definitions_root
        definitions.components = _as_str(definitions_data.get("components")) or definitions.components
        definitions.assets = _as_str(definitions_data.get("assets")) or definitions.assets
        definitions.content = _as_str(definitions_data.get("content")) or definitions.content
        definitions.index = _as_str(definitions_data.get("index")) or definitions.index
        definitions.views_dir = _as_str(definitions_data.get("views_dir")) or definitions.views_dir

    output_data = _as_dict(data.get("output"))
    if output_data:
        output = config.output
        output_root = _as_str(output_data.get("root"))
        if output_root:
            output.root = root / output_root
        output.router = _as_str(output_data.get("router")) or output.router
        extension = _as_str(output_data.get("extension"))
        if extension:
            output.extension = extension if extension.startswith(".") else f".{extension}"

    router_data = _as_dict(data.get("router"))
    if router_data:
        prefix = _as_str(router_data.get("import_prefix"))
        if prefix is not None:
            config.router.import_prefix = prefix
        strict = _as_bool(router_data.get("strict"))
        if strict is not None:
            config.router.strict = strict

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
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
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DefinitionsConfig",
    "JsxGenConfig",
    "OutputConfig",
    "RouterConfig",
    "default_config",
    "load_config",
]
