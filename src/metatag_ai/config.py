import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "INFO").upper()

# --- CONFIG --- generation settings (read by settings.settings_from_env)
ENABLED = os.getenv("METATAG_AI_ENABLED", "")
DEFAULT_PROVIDER = os.getenv("METATAG_AI_DEFAULT_PROVIDER", "")
PERSONA = os.getenv("METATAG_AI_PERSONA", "")
ENABLED_BUNDLES = os.getenv("METATAG_AI_ENABLED_BUNDLES", "")

# LLM providers
OPENAI_API_KEY_ENV = "OPENAI_API_KEY"
OPENAI_MODELS = ["gpt-4o-mini", "gpt-4o", "gpt-4.1-mini"]
LLM_TIMEOUT_S = float(os.getenv("LLM_TIMEOUT_S", "60"))

# Option separator between provider id and model id ("openai__gpt-4o-mini")
PROVIDER_OPTION_SEP = "__"

# === CONFIGURATION === Meta descriptions
DEFAULT_PERSONA = "a professional content writer"
MAX_TEXT_LENGTH = 5000
MAX_DESCRIPTION_LENGTH = 200
# Search results show roughly this many characters on every device
VISIBLE_DESCRIPTION_LENGTH = 160
MIN_TARGET_LENGTH = 155
# Truncation never cuts back to a word boundary at or before this index
MIN_WORD_BREAK_INDEX = 180
ELLIPSIS = "..."
