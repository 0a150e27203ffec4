SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

CORS_ORIGINS = ["http://localhost"]

SESSION_DAYS = 1

SEED_DEFAULT_CLASSES = True
AUTO_SEED_DEMO = False
