# config.py
import os

# -----------------------------
# Knowledge Lab
# -----------------------------
QUIZ_SESSION_SIZE = int(os.getenv("CYBERGUARD_QUIZ_SIZE", "10"))
ADVANCED_SCORE_THRESHOLD = 8

# -----------------------------
# System Audit
# -----------------------------
IP_LOOKUP_URL = os.getenv("CYBERGUARD_IP_LOOKUP_URL", "https://ipapi.co/json/")
LOOKUP_TIMEOUT_SECONDS = float(os.getenv("CYBERGUARD_LOOKUP_TIMEOUT", "2.0"))
MIN_LOADING_SECONDS = float(os.getenv("CYBERGUARD_MIN_LOADING", "0.8"))

# -----------------------------
# Interface
# -----------------------------
DEFAULT_THEME = "dark"
INSIGHT_ROTATION_SECONDS = int(os.getenv("CYBERGUARD_INSIGHT_INTERVAL", "0"))

# -----------------------------
# Logging
# -----------------------------
LOG_LEVEL = os.getenv("CYBERGUARD_LOG_LEVEL", "INFO")
