from __future__ import annotations
import os


# Defaults
_DEFAULT_RECURSION_LIMIT = 20_000
_DEFAULT_LOG_LEVEL = 'WARNING'


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_recursion_limit() -> int:
    return int_from_env('RINHA_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)


def get_log_level() -> str:
    raw = os.environ.get('RINHA_LOG_LEVEL')
    return raw.strip().upper() if raw and raw.strip() else _DEFAULT_LOG_LEVEL


def get_pprint_options_json() -> str | None:
    # JSON object merged over the pretty-printer defaults
    return os.environ.get('RINHA_PPRINT_OPTIONS') or None
