import os
import socket
from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4


def parse_bool(value: str, default: bool) -> bool:
    text = value.strip().lower()
    if not text:
        return default
    if text in {"1", "true", "yes", "y", "on"}:
        return True
    if text in {"0", "false", "no", "n", "off"}:
        return False
    return default


def parse_int(value: str, default: int) -> int:
    text = value.strip()
    if not text:
        return default
    try:
        return int(text)
    except ValueError:
        return default


def parse_path(value: str, default: Path, base_dir: Path) -> Path:
    text = value.strip()
    if not text:
        return default
    path = Path(text)
    if not path.is_absolute():
        path = base_dir / path
    return path


def load_env_file(env_path: Path) -> list[str]:
    if not env_path.exists():
        return []

    loaded_keys: list[str] = []
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key and key not in os.environ:
            os.environ[key] = value
            loaded_keys.append(key)

    return loaded_keys


@dataclass(frozen=True)
class Settings:  # pylint: disable=too-many-instance-attributes
    project_root: Path
    env_path: Path
    loaded_env_keys: tuple[str, ...]
    server_host: str
    server_port: int
    service_name: str
    manifest_path: Path
    instance_id: str
    host_address: str
    app_env: str = "development"
    log_level: str = "INFO"
    http_log_healthchecks: bool = False
    mask_sensitive_ids: bool = True


def validate_startup_settings(settings: Settings) -> None:
    missing_fields: list[str] = []

    if not settings.service_name:
        missing_fields.append("SERVICE_NAME")
    if not 0 < settings.server_port <= 65535:
        missing_fields.append("SERVER_PORT")
    if not settings.instance_id:
        missing_fields.append("INSTANCE_ID")
    if not settings.host_address:
        missing_fields.append("HOST_ADDRESS")

    if missing_fields:
        missing = ", ".join(missing_fields)
        raise RuntimeError(f"Missing or invalid critical settings: {missing}")

    valid_envs = {"development", "staging", "production", "test"}
    if settings.app_env not in valid_envs:
        raise RuntimeError(f"APP_ENV invalid: {settings.app_env}")


def load_settings() -> Settings:
    project_root = Path(__file__).resolve().parents[2]
    env_path = project_root / ".env"
    loaded_env_keys = load_env_file(env_path)

    return Settings(
        project_root=project_root,
        env_path=env_path,
        loaded_env_keys=tuple(loaded_env_keys),
        server_host=os.getenv("SERVER_HOST", "0.0.0.0").strip() or "0.0.0.0",
        server_port=parse_int(os.getenv("SERVER_PORT", "8000"), 8000),
        service_name=os.getenv("SERVICE_NAME", project_root.name).strip() or project_root.name,
        manifest_path=parse_path(
            os.getenv("MANIFEST_PATH", ""),
            default=project_root / "MANIFEST.MF",
            base_dir=project_root,
        ),
        instance_id=os.getenv("INSTANCE_ID", "").strip() or str(uuid4()),
        host_address=os.getenv("HOST_ADDRESS", "").strip() or socket.gethostname(),
        app_env=os.getenv("APP_ENV", "development").strip().lower() or "development",
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        http_log_healthchecks=parse_bool(os.getenv("HTTP_LOG_HEALTHCHECKS", "false"), False),
        mask_sensitive_ids=parse_bool(os.getenv("MASK_SENSITIVE_IDS", "true"), True),
    )
