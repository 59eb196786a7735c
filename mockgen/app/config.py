"""
Application Configuration
=========================

Central configuration for the generator and the API.
Every setting can be overridden through a ``MOCKGEN_*`` environment
variable or a ``.env`` file in the working directory.
"""

import os

from dotenv import load_dotenv

# Settings below are read at import time
load_dotenv()


# =============================================================================
# VERSION
# =============================================================================

VERSION = "1.0.0"
APP_NAME = "Mock Data Generator"


# =============================================================================
# GENERATION
# =============================================================================

# Rows requested from the LLM per state-machine run
BATCH_SIZE = int(os.environ.get("MOCKGEN_BATCH_SIZE", "10"))

# Failed generate/validate attempts tolerated per batch
MAX_RETRIES = 3

# Upper bound on foreign-key values sampled per dependency
FK_SAMPLE_SIZE = 20

# Rows per table when the request config does not say otherwise
DEFAULT_RECORD_COUNT = int(os.environ.get("MOCKGEN_DEFAULT_RECORD_COUNT", "10"))


# =============================================================================
# PREVIEW
# =============================================================================

PREVIEW_ROW_LIMIT = 3
PREVIEW_QUERY_LIMIT = 5


# =============================================================================
# LLM
# =============================================================================

LLM_MODEL = os.environ.get("MOCKGEN_LLM_MODEL", "gemini-2.0-flash")
LLM_TEMPERATURE = float(os.environ.get("MOCKGEN_LLM_TEMPERATURE", "0.7"))


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("MOCKGEN_LOG_LEVEL", "INFO")
LOG_JSON = os.environ.get("MOCKGEN_LOG_JSON", "false").lower() in ("1", "true", "yes")


# =============================================================================
# API
# =============================================================================

# Comma-separated list of allowed origins
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("MOCKGEN_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
