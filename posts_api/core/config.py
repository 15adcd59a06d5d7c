import os
APP_TITLE = os.getenv("APP_TITLE", "Posts API")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
CORS_ALLOW_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]
SEED_POSTS = os.getenv("SEED_POSTS", "true").strip().lower() not in ("0", "false", "no", "off")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
