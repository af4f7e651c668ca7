# simlog_app/config.py
import os

# Load environment variables
try:
    from dotenv import load_dotenv
    load_dotenv()
except ImportError:
    pass


def _parse_csv_env(s: str) -> list:
    parts = [p.strip() for p in (s or "").split(",")]
    return [p for p in parts if p]


DB_PATH = os.getenv("SIMLOG_DB_PATH", "simlog.db")

# Groq API Configuration
GROQ_API_KEY = os.getenv("GROQ_API_KEY")
GROQ_MODEL = os.getenv("GROQ_MODEL", "meta-llama/llama-4-scout-17b-16e-instruct")
GROQ_API_URL = os.getenv("GROQ_API_URL", "https://api.groq.com/openai/v1/chat/completions")
GROQ_TIMEOUT_SECONDS = float(os.getenv("GROQ_TIMEOUT_SECONDS", "120"))

# Auth
SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
# pbkdf2_sha256 hash, see hash_passcode.py; unset means the dashboard is open
OWNER_PASSCODE_HASH = os.getenv("OWNER_PASSCODE_HASH")

_origins_env = os.getenv("ALLOWED_ORIGINS", "*")
ALLOWED_ORIGINS = ["*"] if _origins_env.strip() == "*" else _parse_csv_env(_origins_env)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
