"""Runtime settings and logging bootstrap.

Values are looked up the same way everywhere in the app: environment
variable first, then ``st.secrets``, then a default.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import streamlit as st

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_STORE_PATH = REPO_ROOT / "notes.json"
DEFAULT_SUMMARY_MODEL = "gpt-4o-mini"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _secret(name: str) -> Optional[str]:
    try:
        value = st.secrets.get(name, None)
    except Exception:
        # no secrets.toml configured for this deployment
        logger.debug("st.secrets unavailable while reading %s", name)
        return None
    return str(value) if value else None


def get_value(name: str, default: Optional[str] = None) -> Optional[str]:
    """Return ``name`` from the environment, then ``st.secrets``, else ``default``."""
    value = os.getenv(name)
    if value:
        return value
    return _secret(name) or default


@dataclass(frozen=True)
class Settings:
    store_path: Path
    openai_api_key: Optional[str]
    summary_model: str
    log_level: str


def load_settings() -> Settings:
    return Settings(
        store_path=Path(get_value("NOTES_STORE_PATH", str(DEFAULT_STORE_PATH))),
        openai_api_key=get_value("OPENAI_API_KEY"),
        summary_model=get_value("NOTES_SUMMARY_MODEL", DEFAULT_SUMMARY_MODEL),
        log_level=(get_value("NOTES_LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once; Streamlit reruns call this repeatedly."""
    root = logging.getLogger()
    if getattr(root, "_notes_configured", False):
        return
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
    root._notes_configured = True  # type: ignore[attr-defined]
    logger.debug("logging configured at %s", level)
