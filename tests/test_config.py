from __future__ import annotations

from pathlib import Path

import pytest

from greeting_service.common.config import ServiceConfig, load_config

ENV_VARS = ["GREETING_CONFIG", "GREETING_SERVICE_NAME", "GREETING_HOST", "GREETING_PORT", "GREETING_LOG_LEVEL"]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def test_defaults_when_default_file_missing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert load_config() == ServiceConfig()


def test_yaml_file_values(tmp_path: Path) -> None:
    cfg_file = tmp_path / "service.yaml"
    cfg_file.write_text("service_name: greeter\nport: 9000\nunknown: 1\n", encoding="utf-8")
    cfg = load_config(str(cfg_file))
    assert cfg.service_name == "greeter"
    assert cfg.port == 9000
    assert cfg.host == "0.0.0.0"


def test_env_overrides_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg_file = tmp_path / "service.yaml"
    cfg_file.write_text("port: 9000\nlog_level: INFO\n", encoding="utf-8")
    monkeypatch.setenv("GREETING_CONFIG", str(cfg_file))
    monkeypatch.setenv("GREETING_PORT", "9100")
    monkeypatch.setenv("GREETING_LOG_LEVEL", "DEBUG")
    cfg = load_config()
    assert cfg.port == 9100
    assert cfg.log_level == "DEBUG"


def test_explicit_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_non_mapping_yaml_raises(tmp_path: Path) -> None:
    cfg_file = tmp_path / "service.yaml"
    cfg_file.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(cfg_file))


def test_empty_yaml_is_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "service.yaml"
    cfg_file.write_text("", encoding="utf-8")
    assert load_config(str(cfg_file)) == ServiceConfig()
