"""Configuration management for the AI Meal Planner application."""
import os
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Upstream generative-language API
GEMINI_MODEL: Final[str] = os.getenv('GEMINI_MODEL', 'gemini-2.0-flash')
GEMINI_API_BASE: Final[str] = os.getenv('GEMINI_API_BASE', 'https://generativelanguage.googleapis.com/v1')
UPSTREAM_TIMEOUT: Final[float] = float(os.getenv('UPSTREAM_TIMEOUT', '60'))

# Relay endpoint used by the planner pages
RELAY_URL: Final[str] = os.getenv('RELAY_URL', 'http://localhost:8000/api/generate-meal-plan')

# Generation parameters
DEFAULT_TEMPERATURE: Final[float] = float(os.getenv('DEFAULT_TEMPERATURE', '0.7'))
DEFAULT_MAX_OUTPUT_TOKENS: Final[int] = int(os.getenv('DEFAULT_MAX_OUTPUT_TOKENS', '4000'))

# Pipeline switches
STRICT_PLAN_VALIDATION: Final[bool] = os.getenv('STRICT_PLAN_VALIDATION', 'False').lower() == 'true'
INCLUDE_CALORIES: Final[bool] = os.getenv('INCLUDE_CALORIES', 'True').lower() == 'true'

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
STATIC_DIR: Final[Path] = BASE_DIR / 'static'
TEMPLATES_DIR: Final[Path] = BASE_DIR / 'templates'


def get_gemini_api_key() -> Optional[str]:
    """Return the server-held API key, read on every call so it can be rotated without restart."""
    return os.environ.get('GEMINI_API_KEY') or None
