"""
Configuration settings for the Users API
"""

import os
import logging

from users_api.config.logging_config import resolve_log_level

logger = logging.getLogger(__name__)

# Environment configuration
ENV = os.getenv("ENV", "PROD")  # PROD or QA
DATABASE_URL = os.getenv("DATABASE_URL")
PORT = int(os.getenv("PORT", 8080))
LOG_LEVEL = resolve_log_level(os.getenv("LOG_LEVEL"))

# Database pool configuration
DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", 2))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", 10))
DB_COMMAND_TIMEOUT = float(os.getenv("DB_COMMAND_TIMEOUT", 60))

# API metadata
API_TITLE = "Users API"
API_DESCRIPTION = "Backend API for creating, listing and deleting users"
API_VERSION = "1.0.0"

def parse_allowed_origins(raw: str) -> list:
    """Split a comma-separated origin list; an empty value allows no cross-origin callers"""
    return [origin.strip() for origin in raw.split(",") if origin.strip()]

# CORS settings
ALLOWED_ORIGINS = parse_allowed_origins(os.getenv("ALLOWED_ORIGINS", ""))

logger.info(f"Environment: {ENV}")
if not DATABASE_URL:
    logger.warning("DATABASE_URL not set - database pool cannot be opened until it is configured")
