"""Configuration loading utilities for transcriptkit."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

_FALSE_VALUES = {"false", "0", "no", "off"}
_INT_KEYS = {"api_port", "workers", "normalization_pause_ms"}
_BOOL_KEYS = {"normalization_enabled"}
_ALLOWED_KEYS = {
    "log_level",
    "api_host",
    "api_port",
    "workers",
    "normalization_enabled",
    "normalization_pause_ms",
    "normalization_langs",
    "cefr_data_dir",
}

_Value = str | int | bool


@dataclass(frozen=True)
class AppConfig:
    """Application configuration resolved from profile + environment variables."""

    env: str
    log_level: str
    api_host: str
    api_port: int
    workers: int
    normalization_enabled: bool
    normalization_pause_ms: int
    normalization_langs: frozenset[str]
    cefr_data_dir: Path | None


def load_config(env_name: str | None = None, config_dir: Path | None = None) -> AppConfig:
    """Load configuration from `configs/<env>.toml` and environment overrides."""
    env = env_name or os.getenv("TRANSCRIPTKIT_ENV", "dev")
    resolved_dir = config_dir or _default_config_dir()
    profile_path = resolved_dir / f"{env}.toml"

    defaults: dict[str, _Value] = {
        "log_level": "INFO",
        "api_host": "127.0.0.1",
        "api_port": 8000,
        "workers": 1,
        "normalization_enabled": True,
        "normalization_pause_ms": 1200,
        "normalization_langs": "en,es",
        "cefr_data_dir": "",
    }
    file_values = _load_profile(profile_path)
    defaults.update(file_values)

    log_level = os.getenv("TRANSCRIPTKIT_LOG_LEVEL", str(defaults["log_level"]))
    api_host = os.getenv("TRANSCRIPTKIT_API_HOST", str(defaults["api_host"]))
    api_port = _parse_int(
        "TRANSCRIPTKIT_API_PORT", os.getenv("TRANSCRIPTKIT_API_PORT"), defaults["api_port"]
    )
    workers = _parse_int(
        "TRANSCRIPTKIT_WORKERS", os.getenv("TRANSCRIPTKIT_WORKERS"), defaults["workers"]
    )
    enabled = _parse_bool(
        os.getenv("TRANSCRIPTKIT_NORMALIZATION_ENABLED"), defaults["normalization_enabled"]
    )
    pause_ms = _parse_int(
        "TRANSCRIPTKIT_NORMALIZATION_PAUSE_MS",
        os.getenv("TRANSCRIPTKIT_NORMALIZATION_PAUSE_MS"),
        defaults["normalization_pause_ms"],
    )
    if pause_ms < 0:
        raise ValueError(f"normalization_pause_ms must be >= 0, got {pause_ms}")
    langs = os.getenv("TRANSCRIPTKIT_NORMALIZATION_LANGS", str(defaults["normalization_langs"]))
    data_dir = os.getenv("TRANSCRIPTKIT_CEFR_DATA_DIR", str(defaults["cefr_data_dir"]))

    return AppConfig(
        env=env,
        log_level=log_level,
        api_host=api_host,
        api_port=api_port,
        workers=workers,
        normalization_enabled=enabled,
        normalization_pause_ms=pause_ms,
        normalization_langs=parse_language_list(langs),
        cefr_data_dir=Path(data_dir) if data_dir else None,
    )


def parse_language_list(raw: str) -> frozenset[str]:
    """Parse a comma-separated allow-list; entries are trimmed and lower-cased."""
    return frozenset(part.strip().casefold() for part in raw.split(",") if part.strip())


def _default_config_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "configs"


def _load_profile(path: Path) -> dict[str, _Value]:
    if not path.exists():
        return {}

    with path.open("rb") as handle:
        payload = tomllib.load(handle)

    resolved: dict[str, _Value] = {}
    for key, raw in payload.items():
        if key not in _ALLOWED_KEYS:
            continue
        if key in _INT_KEYS:
            resolved[key] = _coerce_int(key, raw)
        elif key in _BOOL_KEYS:
            resolved[key] = _coerce_bool(key, raw)
        elif key == "normalization_langs" and isinstance(raw, list):
            resolved[key] = ",".join(_coerce_str(key, item) for item in raw)
        else:
            resolved[key] = _coerce_str(key, raw)
    return resolved


def _parse_int(name: str, raw: str | None, default: _Value) -> int:
    if raw is None:
        return _coerce_int(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _parse_bool(raw: str | None, default: _Value) -> bool:
    if raw is None:
        return bool(default)
    return raw.strip().casefold() not in _FALSE_VALUES


def _coerce_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got type bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    raise ValueError(f"{name} must be an integer, got type {type(value).__name__}")


def _coerce_bool(name: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().casefold() not in _FALSE_VALUES
    raise ValueError(f"{name} must be a boolean, got type {type(value).__name__}")


def _coerce_str(name: str, value: object) -> str:
    if isinstance(value, str):
        return value
    raise ValueError(f"{name} must be a string, got type {type(value).__name__}")
