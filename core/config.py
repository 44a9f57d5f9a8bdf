import os
import logging
from dotenv import load_dotenv

# Load .env from project root
try:
    load_dotenv(dotenv_path=os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".env")))
except Exception:
    try:
        load_dotenv()
    except Exception:
        pass

# Logging
LOG_LEVEL = (os.getenv("LOG_LEVEL", "INFO") or "INFO").strip().upper()
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s | %(levelname)s | %(message)s")
logger = logging.getLogger("waitlist")

# Database
DEFAULT_DATABASE_URL = "sqlite:///./waitlist.db"
DATABASE_URL = (os.getenv("DATABASE_URL", "") or "").strip()
if not DATABASE_URL:
    logger.warning(f"[config] DATABASE_URL not set - falling back to {DEFAULT_DATABASE_URL}")
    DATABASE_URL = DEFAULT_DATABASE_URL

# Waitlist
# Written to every entry so several landing pages can share one table
PROJECT_NAME = (os.getenv("WAITLIST_PROJECT_NAME", "waitlist") or "waitlist").strip()
VERIFY_MX = (os.getenv("WAITLIST_VERIFY_MX", "0") or "0").strip().lower() in ("1", "true", "yes")

# CORS
# Prefer ALLOWED_ORIGINS, but also support legacy env names used in .env
_default_origins = ",".join([
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
])
_origins_env = os.getenv("ALLOWED_ORIGINS") or os.getenv("CORS_ORIGINS") or os.getenv("FRONTEND_ORIGIN") or _default_origins
ALLOWED_ORIGINS = [o.strip() for o in _origins_env.split(",") if o.strip()]
_origin_regex_raw = os.getenv("ALLOWED_ORIGINS_REGEX") or os.getenv("CORS_ORIGIN_REGEX") or ""
# Reject overly permissive patterns that would allow any origin
ALLOWED_ORIGINS_REGEX = _origin_regex_raw if (_origin_regex_raw and _origin_regex_raw.strip() not in (".*", "^.*$", ".+")) else None

# Security headers
EMBED_FRAME_ANCESTORS = (os.getenv("EMBED_FRAME_ANCESTORS") or "").strip() or "'none'"
DEBUG = (os.getenv("DEBUG", "") or "").lower() in ("1", "true", "yes")
