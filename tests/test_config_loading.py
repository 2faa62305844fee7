from pathlib import Path

import pytest
from qchart.core.config import SystemConfig
from qchart.core.config_loader import ENV_VAR, load_system_config
from qchart.core.errors import QChartConfigError
from qchart.core.utils import deep_merge_dicts


def test_package_defaults():
    config = load_system_config(force_reload=True)
    assert isinstance(config, SystemConfig)
    assert config.logging.verbose is False
    assert config.render.validate_components is True


def test_cache_is_reused():
    first = load_system_config()
    assert load_system_config() is first
    assert load_system_config(force_reload=True) is not first


def test_override_chain(isolated_config, write_yaml, monkeypatch):
    user_dir = isolated_config / ".qchart"
    user_dir.mkdir()
    (user_dir / "config.yaml").write_text(
        "logging:\n  verbose: true\n  as_json: true\n", encoding="utf-8"
    )
    env_file = write_yaml("env.yaml", {"logging": {"as_json": False}})
    monkeypatch.setenv(ENV_VAR, str(env_file))
    explicit = write_yaml("explicit.yaml", {"render": {"validate_components": False}})

    config = load_system_config(force_reload=True, config_path=explicit)

    assert config.logging.verbose is True
    assert config.logging.as_json is False
    assert config.render.validate_components is False


def test_broken_user_config_is_skipped(isolated_config):
    user_dir = isolated_config / ".qchart"
    user_dir.mkdir()
    (user_dir / "config.yaml").write_text("logging: [unclosed\n", encoding="utf-8")
    config = load_system_config(force_reload=True)
    assert config.logging.verbose is False


def test_explicit_config_errors(write_yaml, tmp_path):
    with pytest.raises(QChartConfigError):
        load_system_config(config_path=tmp_path / "missing.yaml")
    bad = write_yaml("bad.yaml", {"unknown_section": {}})
    with pytest.raises(QChartConfigError, match="Invalid system configuration"):
        load_system_config(config_path=bad)


def test_deep_merge_dicts():
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    merged = deep_merge_dicts(base, {"a": {"c": 20}, "e": 5})
    assert merged == {"a": {"b": 1, "c": 20}, "d": 3, "e": 5}
    assert base["a"]["c"] == 2


def test_home_is_isolated(isolated_config):
    assert Path.home() == isolated_config
