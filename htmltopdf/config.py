"""
Runtime configuration for htmltopdf.
- Reads HTMLTOPDF_* environment variables (optionally seeded from .env files)
- Sets up the log format used across the package

Nothing here is required: every setting has a safe default.
"""
from __future__ import annotations

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"
log = logging.getLogger("htmltopdf.config")

ENGINE_CHOICES = ("auto", "webengine", "ironpdf")
DEFAULT_TIMEOUT_S = 30.0
DEFAULT_WORKERS = 4


_env_loaded = False


def config_dir() -> Path:
    return Path.home() / ".config" / "htmltopdf"


def load_env(extra: Optional[Path] = None) -> None:
    """Seed os.environ from .env files (CWD -> user config dir).
    Variables already set in the process are never overridden.
    This function is safe to run multiple times.
    """
    global _env_loaded
    _env_loaded = True
    if extra is not None:
        load_dotenv(extra)
    load_dotenv(find_dotenv(usecwd=True))  # CWD and its parents
    load_dotenv(config_dir() / ".env")


def ensure_env_loaded() -> None:
    """Run load_env() on first use only, so .env files apply without an explicit call."""
    if not _env_loaded:
        load_env()


def configure_logging(level: str | int | None = None) -> None:
    if level is None:
        level = os.getenv("HTMLTOPDF_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.strip().upper() or "INFO"
    logging.basicConfig(level=level, format=LOG_FORMAT)
    log.debug("Logging configured at %s", level)


def _float_env(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _int_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    engine: str = "auto"
    timeout_s: float = DEFAULT_TIMEOUT_S
    workers: int = DEFAULT_WORKERS
    temp_dir: Optional[Path] = None
    enable_js: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        ensure_env_loaded()
        engine = (os.getenv("HTMLTOPDF_ENGINE", "auto") or "auto").strip().lower()
        if engine not in ENGINE_CHOICES:
            raise ValueError(
                f"HTMLTOPDF_ENGINE must be one of {', '.join(ENGINE_CHOICES)}, got {engine!r}"
            )
        temp_dir = (os.getenv("HTMLTOPDF_TEMP_DIR") or "").strip()
        js_env = (os.getenv("HTMLTOPDF_ENABLE_JS", "0") or "").strip().lower()
        return cls(
            engine=engine,
            timeout_s=_float_env("HTMLTOPDF_TIMEOUT_S", DEFAULT_TIMEOUT_S),
            workers=_int_env("HTMLTOPDF_WORKERS", DEFAULT_WORKERS),
            temp_dir=Path(temp_dir) if temp_dir else None,
            enable_js=js_env in ("1", "true", "yes", "on"),
        )


__all__ = ["LOG_FORMAT", "Settings", "config_dir", "configure_logging", "ensure_env_loaded", "load_env"]
