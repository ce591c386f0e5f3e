import logging
import os
from typing import Optional

import streamlit as st
from dotenv import load_dotenv

from soapcalc.presets import LYE_WATER_PCT_OF_OILS

# Load environment variables from a .env file for local development
load_dotenv()

DEFAULT_GROQ_MODEL = "llama-3.3-70b-versatile"

logger = logging.getLogger(__name__)


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Environment first, then Streamlit secrets (Streamlit Cloud)."""
    value = os.getenv(name)
    if value:
        return value.strip()
    try:
        if name in st.secrets:
            return str(st.secrets[name]).strip()
    except Exception:
        logger.debug("No Streamlit secrets available for %s", name)
    return default


def get_float_setting(name: str, default: float) -> float:
    raw = get_setting(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %s", name, raw, default)
        return default


def groq_api_key() -> Optional[str]:
    return get_setting("GROQ_API_KEY")


def groq_model() -> str:
    return get_setting("GROQ_MODEL", DEFAULT_GROQ_MODEL)


def lye_water_pct() -> float:
    return get_float_setting("SOAPCALC_LYE_WATER_PCT", LYE_WATER_PCT_OF_OILS)


def configure_logging() -> None:
    level_name = (get_setting("LOG_LEVEL", "INFO") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
