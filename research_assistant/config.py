import os
from dotenv import load_dotenv

load_dotenv()

# Basic settings
DATA_DIR = os.path.abspath(os.getenv("DATA_DIR", "data"))
LOGS_DIR = os.path.abspath(os.getenv("LOGS_DIR", os.path.join(DATA_DIR, "logs")))

# LLM provider for the "ask a document" endpoint: gemini | openai
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "gemini").lower()

# Gemini configuration
GEMINI_API_URL = os.getenv(
    "GEMINI_API_URL",
    "https://generativelanguage.googleapis.com/v1beta/models/gemini-pro:generateContent",
)
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or None
GEMINI_TIMEOUT = float(os.getenv("GEMINI_TIMEOUT", "60"))

# OpenAI configuration
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY") or None
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
OPENAI_TEMPERATURE = float(os.getenv("OPENAI_TEMPERATURE", "0.3"))
OPENAI_MAX_TOKENS = int(os.getenv("OPENAI_MAX_TOKENS", "800"))

# Credits ledger
INITIAL_CREDITS = int(os.getenv("INITIAL_CREDITS", "100"))
SEARCH_CREDIT_COST = int(os.getenv("SEARCH_CREDIT_COST", "5"))
REPORT_CREDIT_COST = int(os.getenv("REPORT_CREDIT_COST", "10"))

# Seed for result titles and page numbers; unset means nondeterministic
_seed = os.getenv("SEARCH_RANDOM_SEED")
SEARCH_RANDOM_SEED = int(_seed) if _seed not in (None, "") else None

# Uploads
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(20 * 1024 * 1024)))

# API Configuration
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
FRONTEND_PORT = int(os.getenv("FRONTEND_PORT", "5173"))

os.makedirs(DATA_DIR, exist_ok=True)
os.makedirs(LOGS_DIR, exist_ok=True)
