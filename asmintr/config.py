from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"", "0", "false", "no", "off"}


def repo_root() -> Path:
    # Project root is the directory that contains the `asmintr/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`, fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


@dataclass(frozen=True)
class AsmSettings:
    strict: bool = False
    max_steps: int | None = None
    log_level: str = "WARNING"


def _parse_bool(name: str, raw: str | None) -> bool:
    value = (raw or "").strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _parse_max_steps(raw: str | None) -> int | None:
    value = (raw or "").strip()
    if not value:
        return None
    try:
        steps = int(value)
    except ValueError:
        raise ValueError(f"ASMINTR_MAX_STEPS must be an integer, got {raw!r}") from None
    if steps < 1:
        raise ValueError("ASMINTR_MAX_STEPS must be >= 1")
    return steps


def load_settings() -> AsmSettings:
    load_env()
    return AsmSettings(
        strict=_parse_bool("ASMINTR_STRICT", os.getenv("ASMINTR_STRICT")),
        max_steps=_parse_max_steps(os.getenv("ASMINTR_MAX_STEPS")),
        log_level=(os.getenv("ASMINTR_LOG_LEVEL") or "WARNING").strip().upper(),
    )
