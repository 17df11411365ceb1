import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import yaml
from dotenv import load_dotenv

from coolify_mcp.core.errors import ConfigurationError

DEFAULT_TIMEOUT_MS = 30000
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent.parent / "config.yaml"

# environment variable -> settings key; environment wins over config.yaml
ENV_KEYS = {
    "COOLIFY_BASE_URL": "coolify_base_url",
    "COOLIFY_API_TOKEN": "coolify_api_token",
    "COOLIFY_TIMEOUT": "coolify_timeout",
    "COOLIFY_LOG_DIR": "log_dir",
    "COOLIFY_LOG_LEVEL": "log_level",
}


@dataclass(frozen=True)
class Settings:
    """Validated process configuration.

    `timeout` is in milliseconds, like the COOLIFY_TIMEOUT variable.
    """

    base_url: str
    api_token: str
    timeout: int = DEFAULT_TIMEOUT_MS
    log_dir: Optional[str] = None
    log_level: str = "INFO"

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000.0

    def __repr__(self) -> str:
        return (f"Settings(base_url={self.base_url!r}, api_token='***', timeout={self.timeout}, "
                f"log_dir={self.log_dir!r}, log_level={self.log_level!r})")


def _read_yaml(path: Path) -> dict:
    """
    Load the YAML config file. A missing file is not an error, the
    environment alone may carry every setting.
    """
    if not path.is_file():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping at top level")
    return data


def _parse_timeout(raw) -> int:
    if raw is None or raw == "":
        return DEFAULT_TIMEOUT_MS
    try:
        timeout = int(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"COOLIFY_TIMEOUT must be an integer number of milliseconds, got {raw!r}")
    if timeout <= 0:
        raise ConfigurationError(f"COOLIFY_TIMEOUT must be positive, got {timeout}")
    return timeout


def load_settings(config_path: Optional[str | Path] = None,
                  environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build `Settings` from config.yaml overlaid with environment variables.

    `.env` is loaded into the process environment first (existing variables
    are not overridden). Pass `environ` to read from an explicit mapping
    instead, which skips `.env` loading.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    if config_path is None:
        config_path = environ.get("COOLIFY_MCP_CONFIG") or DEFAULT_CONFIG_PATH
    values = dict(_read_yaml(Path(config_path)))

    for env_name, key in ENV_KEYS.items():
        value = environ.get(env_name)
        if value not in (None, ""):
            values[key] = value

    base_url = str(values.get("coolify_base_url") or "").strip().rstrip("/")
    api_token = str(values.get("coolify_api_token") or "").strip()
    missing = [name for name, value in (("COOLIFY_BASE_URL", base_url), ("COOLIFY_API_TOKEN", api_token)) if not value]
    if missing:
        raise ConfigurationError(
            f"{' and '.join(missing)} {'environment variable is' if len(missing) == 1 else 'environment variables are'} required"
        )

    return Settings(
        base_url=base_url,
        api_token=api_token,
        timeout=_parse_timeout(values.get("coolify_timeout")),
        log_dir=values.get("log_dir") or None,
        log_level=str(values.get("log_level") or "INFO").upper(),
    )
