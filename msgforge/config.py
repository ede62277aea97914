"""Configuration loading for msgforge (.msgforge.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

CONFIG_FILENAME = ".msgforge.yml"

DEFAULT_MESSAGES_DIR = "messages"
DEFAULT_OUTPUT_DIR = "i18n"

CONFIG_TEMPLATE = """\
# msgforge configuration
locales: [en]
default_locale: en
# messages_dir: messages
# output_dir: i18n
# validate_translations: true
# generate_namespaces: true
# exclude_paths: []
"""


class ConfigurationError(RuntimeError):
    """Raised when the configuration is missing, unreadable or invalid."""


@dataclass
class MsgForgeConfig:
    """Represents the effective settings for one compile run."""

    root: Path
    locales: List[str]
    default_locale: str
    messages_dir: Path
    output_dir: Path
    validate_translations: bool = True
    generate_namespaces: bool = True
    exclude_paths: List[str] = field(default_factory=list)


def load_config(
    config_path: Path, overrides: Mapping[str, Any] | None = None
) -> MsgForgeConfig:
    """Load configuration from disk, apply ``overrides`` and validate the result."""
    config_file = resolve_config_path(config_path)
    root = config_file.parent.resolve()

    data: Dict[str, Any] = {}
    if config_file.exists():
        data = _read_config(config_file)

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    if not data:
        raise ConfigurationError(
            f"{CONFIG_FILENAME} not found in {root}. Run `msgforge init` to create one."
        )

    locales = _as_str_list(data.get("locales"))
    if not locales:
        raise ConfigurationError("`locales` must list at least one locale")
    duplicates = sorted({locale for locale in locales if locales.count(locale) > 1})
    if duplicates:
        raise ConfigurationError(f"`locales` contains duplicates: {', '.join(duplicates)}")

    default_locale = _as_str(data.get("default_locale")) or locales[0]
    if default_locale not in locales:
        raise ConfigurationError(
            f"`default_locale` {default_locale!r} is not one of the configured locales "
            f"({', '.join(locales)})"
        )

    messages_dir = _as_str(data.get("messages_dir")) or DEFAULT_MESSAGES_DIR
    output_dir = _as_str(data.get("output_dir")) or DEFAULT_OUTPUT_DIR

    return MsgForgeConfig(
        root=root,
        locales=locales,
        default_locale=default_locale,
        messages_dir=(root / messages_dir).resolve(),
        output_dir=(root / output_dir).resolve(),
        validate_translations=_as_bool(data.get("validate_translations"), "validate_translations"),
        generate_namespaces=_as_bool(data.get("generate_namespaces"), "generate_namespaces"),
        exclude_paths=_as_str_list(data.get("exclude_paths")),
    )


def resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.suffix not in {".yml", ".yaml"}:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def write_default_config(directory: Path) -> Path:
    """Write a starter configuration file, refusing to overwrite an existing one."""
    config_file = directory.expanduser().resolve() / CONFIG_FILENAME
    if config_file.exists():
        raise FileExistsError(f"Config file already exists at {config_file}")
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(CONFIG_TEMPLATE, encoding="utf-8")
    return config_file


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigurationError(f"{path.name} must contain a mapping at the root")
    return loaded


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any, name: str) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    raise ConfigurationError(f"`{name}` must be a boolean, got {value!r}")


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float)) and not isinstance(item, bool)]
    raise ConfigurationError(f"Expected a list of strings, got {value!r}")
