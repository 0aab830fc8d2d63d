"""
Environment configuration loader for StarChain
"""
import os
import json
from typing import List
from dotenv import load_dotenv

# Load a .env file from the working directory, if present
load_dotenv()


def get_env_str(key: str, default: str = "") -> str:
    """Get string environment variable with default"""
    return os.getenv(key, default)


def get_env_int(key: str, default: int = 0) -> int:
    """Get integer environment variable with default"""
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        return default


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get boolean environment variable with default"""
    return str(os.getenv(key, str(default))).lower() in ('true', '1', 'yes')


def get_env_list(key: str, default: List = None) -> List:
    """Get list environment variable with default"""
    value = os.getenv(key)
    if not value:
        return default or []
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return [item.strip() for item in value.split(',') if item.strip()]


# API
API_HOST = get_env_str("API_HOST", "127.0.0.1")
API_PORT = get_env_int("API_PORT", 8000)
CORS_ORIGINS = get_env_list("CORS_ORIGINS", ["*"])

# Logging
LOG_DIR = get_env_str("LOG_DIR", "logs")
LOG_LEVEL = get_env_str("LOG_LEVEL", "INFO")

# Ledger
CHALLENGE_WINDOW_SECONDS = get_env_int("CHALLENGE_WINDOW_SECONDS", 300)
CHALLENGE_DOMAIN = get_env_str("CHALLENGE_DOMAIN", "starRegistry")
GENESIS_DATA = get_env_str("GENESIS_DATA", "Genesis Block")
VALIDATE_ON_SUBMIT = get_env_bool("VALIDATE_ON_SUBMIT", True)
