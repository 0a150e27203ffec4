import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Dashboard client origins allowed to call /api/* with cookies
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

SEED_DEFAULT_CLASSES = bool(int(os.getenv("SEED_DEFAULT_CLASSES", "1")))
# Optional: also seed demo teacher/student accounts on startup
AUTO_SEED_DEMO = bool(int(os.getenv("AUTO_SEED_DEMO", "1")))
