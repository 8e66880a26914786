"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# Remote REST API
API_BASE: str = os.getenv("JOB_BOARD_API_BASE", "http://localhost:5010")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Session persistence. With TOKEN_FILE unset the token lives in the browser session only.
TOKEN_STORAGE_KEY: str = "token"
TOKEN_FILE: str = os.getenv("JOB_BOARD_TOKEN_FILE", "")

# Search / list timing
SEARCH_DEBOUNCE_SECONDS: float = 0.4
MIN_LOADING_SECONDS: float = 0.5
RESULTS_POLL_SECONDS: float = 0.3

# Layout
MOBILE_MAX_WIDTH: int = 640
DESKTOP_DEFAULT_WIDTH: int = 1280

# Pagination
PAGE_SIZE_OPTIONS: tuple = (10, 20, 50)
DEFAULT_PAGE_SIZE: int = 10

# Job posting vocabularies (shared by filters and the admin form)
JOB_TYPES: list = ["Full-time", "Part-time", "Contract", "Internship"]
DEFAULT_JOB_TYPE: str = "Full-time"
CURRENCIES: list = ["VND", "USD", "EUR"]
DEFAULT_CURRENCY: str = "VND"

# User-facing fallback messages
LIST_ERROR_MESSAGE: str = "Could not load the job list."
ADMIN_LIST_ERROR_MESSAGE: str = "Could not load the job list (admin)."
DETAIL_ERROR_MESSAGE: str = "Could not load this job."
PREVIEW_UNAVAILABLE_MESSAGE: str = "Job details are not available."
LOGIN_FAILED_MESSAGE: str = "Login failed."
SAVE_FAILED_MESSAGE: str = "Save failed."
