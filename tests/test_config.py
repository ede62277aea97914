"""Tests for msgforge.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from msgforge.config import (
    CONFIG_FILENAME,
    ConfigurationError,
    MsgForgeConfig,
    load_config,
    resolve_config_path,
    write_default_config,
)


def _write(tmp_path: Path, text: str) -> Path:
    config_file = tmp_path / CONFIG_FILENAME
    config_file.write_text(text, encoding="utf-8")
    return config_file


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = _write(
        tmp_path,
        """
locales: [en, es, fr]
default_locale: es
messages_dir: locales
output_dir: app/i18n
validate_translations: false
generate_namespaces: no
exclude_paths:
  - drafts/
""",
    )

    config = load_config(config_file)

    assert isinstance(config, MsgForgeConfig)
    assert config.root == tmp_path.resolve()
    assert config.locales == ["en", "es", "fr"]
    assert config.default_locale == "es"
    assert config.messages_dir == (tmp_path / "locales").resolve()
    assert config.output_dir == (tmp_path / "app" / "i18n").resolve()
    assert config.validate_translations is False
    assert config.generate_namespaces is False
    assert config.exclude_paths == ["drafts/"]


def test_load_config_applies_defaults(tmp_path: Path) -> None:
    _write(tmp_path, "locales: de, en\n")

    config = load_config(tmp_path)

    assert config.locales == ["de", "en"]
    assert config.default_locale == "de"
    assert config.messages_dir == (tmp_path / "messages").resolve()
    assert config.output_dir == (tmp_path / "i18n").resolve()
    assert config.validate_translations is True
    assert config.generate_namespaces is True
    assert config.exclude_paths == []


def test_overrides_win_over_file_values(tmp_path: Path) -> None:
    _write(tmp_path, "locales: [en]\nmessages_dir: messages\n")

    config = load_config(
        tmp_path,
        {
            "locales": ["en", "es"],
            "messages_dir": "other",
            "output_dir": None,
            "validate_translations": False,
        },
    )

    assert config.locales == ["en", "es"]
    assert config.messages_dir == (tmp_path / "other").resolve()
    assert config.output_dir == (tmp_path / "i18n").resolve()
    assert config.validate_translations is False


def test_overrides_alone_are_enough(tmp_path: Path) -> None:
    config = load_config(tmp_path, {"locales": ["en"]})

    assert config.locales == ["en"]
    assert config.default_locale == "en"


def test_missing_config_points_at_init(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="msgforge init"):
        load_config(tmp_path)


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("locales: [en\n", "Failed to parse"),
        ("- en\n- es\n", "mapping at the root"),
        ("default_locale: en\n", "at least one locale"),
        ("locales: [en, es, en]\n", "duplicates: en"),
        ("locales: [en, es]\ndefault_locale: fr\n", "'fr' is not one of"),
        ("locales: [en]\nvalidate_translations: maybe\n", "must be a boolean"),
        ("locales: [en]\nexclude_paths: 3\n", "list of strings"),
    ],
)
def test_invalid_config_raises(tmp_path: Path, text: str, message: str) -> None:
    _write(tmp_path, text)

    with pytest.raises(ConfigurationError, match=message):
        load_config(tmp_path)


def test_resolve_config_path_accepts_dir_or_file(tmp_path: Path) -> None:
    expected = (tmp_path / CONFIG_FILENAME).resolve()

    assert resolve_config_path(tmp_path) == expected
    assert resolve_config_path(tmp_path / CONFIG_FILENAME) == expected
    assert resolve_config_path(tmp_path / "custom.yaml") == (tmp_path / "custom.yaml").resolve()


def test_write_default_config_creates_loadable_file(tmp_path: Path) -> None:
    config_file = write_default_config(tmp_path / "project")

    assert config_file.name == CONFIG_FILENAME
    config = load_config(config_file)
    assert config.locales == ["en"]
    assert config.default_locale == "en"

    with pytest.raises(FileExistsError):
        write_default_config(tmp_path / "project")
