import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Load the demo school (routes, students, fee structure, receipts) on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

RECENT_RECEIPTS_LIMIT = int(os.getenv("RECENT_RECEIPTS_LIMIT", "5"))
