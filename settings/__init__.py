"""Application settings."""

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Dataset
UNIVERSITIES_JSON_PATH = os.getenv("UNIVERSITIES_JSON_PATH") or None
REMOTE_FALLBACK = os.getenv("UNIVERSITIES_REMOTE_FALLBACK", "").lower() in ("1", "true", "yes")
DATASET_CACHE_TTL = int(os.getenv("DATASET_CACHE_TTL", "3600"))
DATASET_ID_BASE = 100000

# Remote dataset API
HIPOLABS_BASE_URL = os.getenv("HIPOLABS_BASE_URL", "https://universities.hipolabs.com")
HIPOLABS_TIMEOUT = int(os.getenv("HIPOLABS_TIMEOUT", "30"))

# Database
USERS_DB_PATH = os.getenv("USERS_DB_PATH", "users.duckdb")

# Cognito
COGNITO_REGION = os.getenv("COGNITO_REGION")
COGNITO_USER_POOL_ID = os.getenv("COGNITO_USER_POOL_ID")
COGNITO_CLIENT_ID = os.getenv("COGNITO_CLIENT_ID")

# Server
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")
PORT = int(os.getenv("PORT", "5000"))

# Logging
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
