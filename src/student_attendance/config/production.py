import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CORS_ORIGINS = [o for o in os.getenv("CORS_ORIGINS", "").split(",") if o]

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

SEED_DEFAULT_CLASSES = bool(int(os.getenv("SEED_DEFAULT_CLASSES", "1")))
AUTO_SEED_DEMO = bool(int(os.getenv("AUTO_SEED_DEMO", "0")))
