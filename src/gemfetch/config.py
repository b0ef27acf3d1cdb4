from pathlib import Path
from typing import Dict

CONFIG_DIR = Path.home() / ".gemfetch"
CONFIG_FILE = CONFIG_DIR / "config"

DEFAULT_REGISTRY_URL = "https://rubygems.org/api/v1/gems/"
REGISTRY_URL_KEY = "GEMFETCH_REGISTRY_URL"

def _read_config() -> Dict[str, str]:
    config = {}
    if not CONFIG_FILE.exists():
        return config
    try:
        with open(CONFIG_FILE, "r") as f:
            for line in f:
                line = line.strip()
                if "=" in line:
                    key, value = line.split("=", 1)
                    config[key] = value
    except (IOError, PermissionError, OSError):
        # unreadable config is treated as empty
        return {}
    return config

def _write_config(config: Dict[str, str]):
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    try:
        with open(CONFIG_FILE, "w") as f:
            for key, value in config.items():
                f.write(f"{key}={value}\n")
    except (IOError, PermissionError, OSError) as e:
        raise RuntimeError(f"failed to write config file: {e}") from e

def get_registry_url() -> str:
    """get the configured registry URL, falling back to rubygems.org."""
    return _read_config().get(REGISTRY_URL_KEY) or DEFAULT_REGISTRY_URL

def set_registry_url(url: str):
    """set the registry URL in config file, preserving other config values."""
    config = _read_config()
    config[REGISTRY_URL_KEY] = url
    _write_config(config)

def reset_registry_url():
    """drop the registry URL from the config file so the default applies again."""
    config = _read_config()
    if REGISTRY_URL_KEY in config:
        del config[REGISTRY_URL_KEY]
        _write_config(config)
