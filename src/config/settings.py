"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Logging ---
MAX_PAYLOAD_LOG_CHARS: int = int(os.getenv("MAX_PAYLOAD_LOG_CHARS", "200"))

# --- Backward compatibility ---
DEPRECATION_WARNINGS_ENABLED: bool = os.getenv("DEPRECATION_WARNINGS_ENABLED", "true").lower() == "true"
