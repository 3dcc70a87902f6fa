from pathlib import Path

import pytest

from src.shared.config import (
    Settings,
    load_env_file,
    load_settings,
    parse_bool,
    parse_int,
    parse_path,
    validate_startup_settings,
)


def _valid_settings() -> Settings:
    return Settings(
        project_root=Path("."),
        env_path=Path(".env"),
        loaded_env_keys=(),
        server_host="0.0.0.0",
        server_port=8000,
        service_name="billing",
        manifest_path=Path("MANIFEST.MF"),
        instance_id="instance-1",
        host_address="localhost",
    )


def test_parse_helpers_cover_default_and_invalid_paths() -> None:
    assert parse_bool("", default=True) is True
    assert parse_bool("invalid", default=False) is False
    assert parse_bool("on", default=False) is True
    assert parse_int("", default=8) == 8
    assert parse_int("abc", default=8) == 8


def test_parse_path_resolves_relative_to_base_dir(tmp_path) -> None:
    default = tmp_path / "MANIFEST.MF"

    assert parse_path("", default=default, base_dir=tmp_path) == default
    assert parse_path("build/MANIFEST.MF", default=default, base_dir=tmp_path) == tmp_path / "build" / "MANIFEST.MF"
    assert parse_path("/opt/app/MANIFEST.MF", default=default, base_dir=tmp_path) == Path("/opt/app/MANIFEST.MF")


def test_load_env_file_returns_empty_when_file_is_missing(tmp_path) -> None:
    assert load_env_file(tmp_path / ".env.missing") == []


def test_load_env_file_ignores_comments_and_invalid_rows(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("HEALTH_REPORT_TEST_KEY", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("# comment\nINVALID_LINE\n\nHEALTH_REPORT_TEST_KEY=value\n", encoding="utf-8")

    loaded = load_env_file(env_file)

    assert loaded == ["HEALTH_REPORT_TEST_KEY"]


def test_load_settings_reads_service_identity_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SERVICE_NAME", "orders")
    monkeypatch.setenv("INSTANCE_ID", "instance-42")
    monkeypatch.setenv("HOST_ADDRESS", "10.0.0.9")
    monkeypatch.setenv("MANIFEST_PATH", "/opt/orders/MANIFEST.MF")

    settings = load_settings()

    assert settings.service_name == "orders"
    assert settings.instance_id == "instance-42"
    assert settings.host_address == "10.0.0.9"
    assert settings.manifest_path == Path("/opt/orders/MANIFEST.MF")


def test_load_settings_generates_instance_id_and_host_when_unset(monkeypatch) -> None:
    monkeypatch.setenv("INSTANCE_ID", "")
    monkeypatch.setenv("HOST_ADDRESS", "")

    settings = load_settings()

    assert settings.instance_id
    assert settings.host_address


def test_validate_startup_settings_accepts_valid_settings() -> None:
    validate_startup_settings(_valid_settings())


def test_validate_startup_settings_reports_missing_critical_values() -> None:
    settings = _valid_settings()
    broken = Settings(
        **{
            **settings.__dict__,
            "service_name": "",
            "server_port": 0,
            "instance_id": "",
            "host_address": "",
        }
    )

    with pytest.raises(RuntimeError, match="SERVICE_NAME, SERVER_PORT, INSTANCE_ID, HOST_ADDRESS"):
        validate_startup_settings(broken)


def test_validate_startup_settings_rejects_invalid_app_env() -> None:
    settings = _valid_settings()
    broken = Settings(**{**settings.__dict__, "app_env": "qa"})

    with pytest.raises(RuntimeError, match="APP_ENV invalid"):
        validate_startup_settings(broken)
