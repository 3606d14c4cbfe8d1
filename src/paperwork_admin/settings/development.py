import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# "memory" keeps everything in process (reset on restart); "mysql" uses DB_CONFIG.
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "paperwork_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Apply database/schema.sql on startup (mysql backend only, idempotent).
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Load the demo customers/builders/documents on startup.
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

# "count" (existing documents of the type + 1) or "sequence" (per type/year counter).
DOCUMENT_NUMBERING = os.getenv("DOCUMENT_NUMBERING", "count")
STRICT_STATUS_TRANSITIONS = bool(int(os.getenv("STRICT_STATUS_TRANSITIONS", "0")))
BUILDER_NAME_CASE_SENSITIVE = bool(int(os.getenv("BUILDER_NAME_CASE_SENSITIVE", "1")))

UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", "uploads")
