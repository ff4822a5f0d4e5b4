"""Tests for kernel/config.py — YAML config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from domain.errors import ConfigError
from kernel import config


def test_config_path_honours_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(config.CONFIG_ENV, str(tmp_path / "check_varnish.yaml"))
    assert config.config_path() == tmp_path / "check_varnish.yaml"


def test_config_path_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(config.CONFIG_ENV, raising=False)
    assert config.config_path() == config.DEFAULT_CONFIG_FILE


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    cfg = config.load_config(tmp_path / "absent.yaml")
    assert cfg == config.ProbeConfig()
    assert cfg.varnishstat == "varnishstat"
    assert cfg.instance is None
    assert cfg.log_file is None
    assert cfg.timeout == config.DEFAULT_TIMEOUT


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    cf = tmp_path / "check_varnish.yaml"
    cf.write_text("")
    assert config.load_config(cf) == config.ProbeConfig()


def test_loads_all_keys(tmp_path: Path) -> None:
    cf = tmp_path / "check_varnish.yaml"
    cf.write_text(
        "varnishstat: /opt/varnish/bin/varnishstat\n"
        "instance: edge1\n"
        "log_file: /var/log/check_varnish.log\n"
        "timeout: 2.5\n"
    )

    cfg = config.load_config(cf)

    assert cfg.varnishstat == "/opt/varnish/bin/varnishstat"
    assert cfg.instance == "edge1"
    assert cfg.log_file == Path("/var/log/check_varnish.log")
    assert cfg.timeout == 2.5


def test_load_uses_env_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cf = tmp_path / "check_varnish.yaml"
    cf.write_text("instance: edge3\n")
    monkeypatch.setenv(config.CONFIG_ENV, str(cf))

    assert config.load_config().instance == "edge3"


def test_malformed_yaml_is_usage_error(tmp_path: Path) -> None:
    cf = tmp_path / "check_varnish.yaml"
    cf.write_text("instance: [unclosed\n")

    with pytest.raises(ConfigError, match="cannot read config"):
        config.load_config(cf)


def test_non_mapping_is_usage_error(tmp_path: Path) -> None:
    cf = tmp_path / "check_varnish.yaml"
    cf.write_text("- a\n- b\n")

    with pytest.raises(ConfigError, match="must be a mapping"):
        config.load_config(cf)


def test_bad_timeout_is_usage_error(tmp_path: Path) -> None:
    cf = tmp_path / "check_varnish.yaml"
    cf.write_text("timeout: soon\n")

    with pytest.raises(ConfigError, match="invalid timeout"):
        config.load_config(cf)
