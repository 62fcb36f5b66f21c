import json

import pytest

from leader_lexis.config.loader import load_global_config, resolve_data_path
from leader_lexis.core.exceptions import ConfigError


def _write_global(tmp_path, raw):
    (tmp_path / "global.json").write_text(json.dumps(raw))
    return tmp_path


def test_load_global_config_defaults(tmp_path):
    root = _write_global(tmp_path, {"data": {"path": "leaders.csv"}})

    cfg = load_global_config(root)

    assert cfg.ui_title == "Political Leaders"
    assert cfg.default_country_group == "oecd"
    assert cfg.country_group_keys == ["oecd", "eu27", "brics", "gulf", "sa"]
    assert cfg.label_for("sa") == "South America"
    assert cfg.data.name == "Political Leaders"


def test_country_groups_accept_keys_or_objects(tmp_path):
    root = _write_global(
        tmp_path,
        {
            "data": {"path": "leaders.csv"},
            "country_groups": ["oecd", {"key": "nordic", "label": "Nordic"}],
        },
    )

    cfg = load_global_config(root)

    assert cfg.country_group_keys == ["oecd", "nordic"]
    assert cfg.label_for("nordic") == "Nordic"
    assert cfg.label_for("oecd") == "OECD"


def test_default_group_must_be_configured(tmp_path):
    root = _write_global(
        tmp_path,
        {"data": {"path": "x.csv"}, "country_groups": ["sa"], "default_country_group": "oecd"},
    )

    with pytest.raises(ConfigError):
        load_global_config(root)


def test_missing_global_json_is_config_error(tmp_path):
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_missing_data_section_is_config_error(tmp_path):
    root = _write_global(tmp_path, {"ui_title": "x"})

    with pytest.raises(ConfigError):
        load_global_config(root)


def test_resolve_data_path_relative_to_config_root(tmp_path, monkeypatch):
    monkeypatch.delenv("LEADER_LEXIS_DATA_ROOT", raising=False)
    root = _write_global(tmp_path, {"data": {"path": "leaders.csv"}})

    cfg = load_global_config(root)

    assert resolve_data_path(cfg) == tmp_path / "leaders.csv"


def test_resolve_data_path_prefers_env_root(tmp_path, monkeypatch):
    data_root = tmp_path / "elsewhere"
    data_root.mkdir()
    (data_root / "leaders.csv").write_text("")
    monkeypatch.setenv("LEADER_LEXIS_DATA_ROOT", str(data_root))
    root = _write_global(tmp_path, {"data": {"path": "data/leaders.csv"}})

    cfg = load_global_config(root)

    # redundant 'data/' prefix falls back to the file directly under the root
    assert resolve_data_path(cfg) == data_root / "leaders.csv"
