import os
import tempfile

SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "paperwork_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
SEED_DEMO_DATA = False

DOCUMENT_NUMBERING = "count"
STRICT_STATUS_TRANSITIONS = False
BUILDER_NAME_CASE_SENSITIVE = True

UPLOAD_FOLDER = os.path.join(tempfile.gettempdir(), "paperwork-admin-test-uploads")
