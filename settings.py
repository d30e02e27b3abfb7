from __future__ import annotations
import logging
import os
import streamlit as st
from streamlit.errors import StreamlitAPIException


def _secret(key: str):
    # No secrets.toml at all is the same as the key being absent
    try:
        if key in st.secrets:
            return st.secrets[key]
    except (FileNotFoundError, StreamlitAPIException):
        return None
    return None


def get_cfg(key: str, default=None):
    v = _secret(key)
    if v is not None:
        return v
    v = os.getenv(key)
    if v:
        return v
    return default


def require_cfg(key: str) -> str:
    v = get_cfg(key)
    if v is None or str(v) == "":
        raise RuntimeError(f"Missing config: {key}. Add it to Streamlit secrets or env vars.")
    return str(v)


def _typed(key: str, default, cast):
    # Fail closed: a malformed value falls back to the default
    try:
        return cast(get_cfg(key, default))
    except (TypeError, ValueError):
        return default


def unit_price() -> float:
    return _typed("CUPCAKE_UNIT_PRICE", 2.00, float)


def same_day_surcharge() -> float:
    return _typed("CUPCAKE_SAME_DAY_SURCHARGE", 3.00, float)


def pickup_days() -> int:
    days = _typed("CUPCAKE_PICKUP_DAYS", 4, int)
    return days if days > 0 else 4


def currency_symbol() -> str:
    return str(get_cfg("CUPCAKE_CURRENCY_SYMBOL", "£"))


def timezone_name() -> str:
    return str(get_cfg("CUPCAKE_TIMEZONE", "Europe/London"))


def log_level() -> str:
    level = str(get_cfg("CUPCAKE_LOG_LEVEL", "INFO")).upper()
    # getLevelName returns the numeric level only for known names
    return level if isinstance(logging.getLevelName(level), int) else "INFO"


def log_dir() -> str | None:
    v = get_cfg("CUPCAKE_LOG_DIR")
    return str(v) if v else None
