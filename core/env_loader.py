import logging
import os
from pathlib import Path

import streamlit as st

APP_DIR = Path(__file__).resolve().parents[1]
DEFAULT_MODEL_NAME = "gemini-2.5-flash"
API_KEY_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY")

logger = logging.getLogger(__name__)


def quiet_logs():
    os.environ.setdefault("GRPC_VERBOSITY", "ERROR")
    os.environ.setdefault("GRPC_CPP_ENABLE_STACKTRACE", "0")
    os.environ.setdefault("GRPC_ALTS_ENABLED", "0")
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("google_genai").setLevel(logging.WARNING)


def configure_logging():
    level = os.getenv("PROMPT_STUDIO_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@st.cache_resource(show_spinner=False)
def load_env() -> str:
    """
    Read the API key once per process: real environment first, then .env.
    The key is only ever held in memory.
    """
    from dotenv import load_dotenv
    load_dotenv(override=False)
    for var in API_KEY_VARS:
        key = os.getenv(var, "")
        if key:
            return key
    logger.warning("No Gemini API key found in %s", ", ".join(API_KEY_VARS))
    return ""


def get_model_name() -> str:
    return os.getenv("GEMINI_MODEL", "") or DEFAULT_MODEL_NAME


def get_data_dir() -> Path:
    custom = os.getenv("PROMPT_STUDIO_DATA_DIR", "")
    return Path(custom) if custom else APP_DIR / "projects"


def get_key_info(key: str) -> str:
    if not key:
        return "no key"
    return f"key_len={len(key)} | key_hash={abs(hash(key)) % 100000}"


@st.cache_resource(show_spinner=False)
def init_client(api_key: str):
    if not api_key:
        return None
    from google import genai
    return genai.Client(api_key=api_key)
