import os
import tomllib
from pathlib import Path
from typing import Any

_DEFAULT_CONFIG_PATH = Path("config.toml")
_DEFAULT_ENV_PATH = Path("secrets")

_SECRET_VARS = {
    "GOOGLE_SHEETS_ID": "google_sheets_id",
    "GOOGLE_API_KEY": "google_api_key",
    "MAPBOX_TOKEN": "mapbox_token",
}


def load(path: Path = _DEFAULT_CONFIG_PATH, env_path: Path = _DEFAULT_ENV_PATH) -> dict[str, Any]:
    """Load config from TOML, then overlay any secrets from the env file."""
    with open(path, "rb") as f:
        cfg = tomllib.load(f)
    _load_env(env_path, cfg)
    return cfg


def _load_env(env_path: Path, cfg: dict) -> None:
    """
    Parse a dotenv-style file and inject values into the config dict.

    Supported variable names:
      GOOGLE_SHEETS_ID  -> cfg["secrets"]["google_sheets_id"]
      GOOGLE_API_KEY    -> cfg["secrets"]["google_api_key"]
      MAPBOX_TOKEN      -> cfg["secrets"]["mapbox_token"]

    Shell environment variables take precedence over file values.
    """
    _apply_env_vars(cfg)

    if not env_path.exists():
        return

    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key not in os.environ:
                os.environ[key] = value

    _apply_env_vars(cfg)


def _apply_env_vars(cfg: dict) -> None:
    secrets = cfg.setdefault("secrets", {})
    for var, name in _SECRET_VARS.items():
        if v := os.environ.get(var):
            secrets[name] = v


def get_site(cfg: dict) -> dict:
    return cfg.get("site", {})


def get_source(cfg: dict) -> dict:
    """The [source] section with the Sheets credentials filled in."""
    secrets = cfg.get("secrets", {})
    source = {"type": "sheets", **cfg.get("source", {})}
    source.setdefault("sheet_id", secrets.get("google_sheets_id", ""))
    source.setdefault("api_key", secrets.get("google_api_key", ""))
    return source


def get_geocoding(cfg: dict) -> dict:
    secrets = cfg.get("secrets", {})
    geocoding = {"provider": "mapbox", "timeout": 10, "max_workers": 8, **cfg.get("geocoding", {})}
    geocoding.setdefault("token", secrets.get("mapbox_token", ""))
    return geocoding
