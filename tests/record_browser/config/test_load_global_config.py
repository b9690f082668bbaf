from __future__ import annotations

import json

import pytest

from record_browser.config.loader import ENV_DATA_SOURCE, load_global_config
from record_browser.config.model import LocaleFormat, RecordColumns
from record_browser.core.exceptions import ConfigError


def _write_global(tmp_path, raw) -> None:
    (tmp_path / "global.json").write_text(json.dumps(raw, ensure_ascii=False), encoding="utf-8")


def test_defaults_when_keys_missing(tmp_path, monkeypatch):
    monkeypatch.delenv(ENV_DATA_SOURCE, raising=False)
    _write_global(tmp_path, {})

    cfg = load_global_config(tmp_path)

    assert cfg.page_size == 10
    assert cfg.page_window == 5
    assert cfg.debounce_ms == 300
    assert cfg.debounce_seconds == 0.3
    assert cfg.export_prefix == "filtered_data"
    assert cfg.columns == RecordColumns()
    assert cfg.locale == LocaleFormat()
    assert cfg.resolve_data_path() == (tmp_path / "data" / "data.json").resolve()
    assert not cfg.is_remote_source


def test_columns_and_locale_overrides(tmp_path, monkeypatch):
    monkeypatch.delenv(ENV_DATA_SOURCE, raising=False)
    _write_global(tmp_path, {
        "page_size": 25,
        "columns": {"group_name": "group", "code": "sku", "unknown": "ignored"},
        "locale": {"currency_suffix": " USD", "group_separator": ","},
    })

    cfg = load_global_config(tmp_path)

    assert cfg.page_size == 25
    assert cfg.columns.group_name == "group"
    assert cfg.columns.code == "sku"
    assert cfg.columns.name == RecordColumns().name
    assert cfg.locale.currency_suffix == " USD"
    assert cfg.locale.date_format == "%d/%m/%Y"


def test_env_overrides_data_source(tmp_path, monkeypatch):
    _write_global(tmp_path, {"data_source": "data/data.json"})
    monkeypatch.setenv(ENV_DATA_SOURCE, "https://example.test/records.json")

    cfg = load_global_config(tmp_path)

    assert cfg.data_source == "https://example.test/records.json"
    assert cfg.is_remote_source


def test_missing_global_json(tmp_path):
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_invalid_json(tmp_path):
    (tmp_path / "global.json").write_text("{oops", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


@pytest.mark.parametrize(
    "raw",
    [
        {"page_size": 0},
        {"page_window": "five"},
        {"debounce_ms": -1},
        {"fetch_timeout": "soon"},
        {"fetch_timeout": 0},
        {"fetch_timeout": None},
    ],
)
def test_invalid_sizes_rejected(tmp_path, raw):
    _write_global(tmp_path, raw)

    with pytest.raises(ConfigError):
        load_global_config(tmp_path)
