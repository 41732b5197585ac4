"""
config.py
---------
Central configuration module. Loads the database settings from the
environment (and a local .env file) and exposes them as typed constants.
"""

import os

from dotenv import load_dotenv

load_dotenv()


# ── Database ──────────────────────────────────────────────
DB_BACKEND: str = os.getenv("DB_BACKEND", "mysql").strip().lower()
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "3306"))
DB_NAME: str = os.getenv("DB_NAME", "projects")
DB_USER: str = os.getenv("DB_USER", "projects")
DB_PASS: str = os.getenv("DB_PASS", "projects")

# ── SQLite (local use and tests) ──────────────────────────
SQLITE_PATH: str = os.getenv("SQLITE_PATH", "projects.db")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
