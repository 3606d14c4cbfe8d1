import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "paperwork_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

DOCUMENT_NUMBERING = os.getenv("DOCUMENT_NUMBERING", "sequence")
STRICT_STATUS_TRANSITIONS = bool(int(os.getenv("STRICT_STATUS_TRANSITIONS", "0")))
BUILDER_NAME_CASE_SENSITIVE = bool(int(os.getenv("BUILDER_NAME_CASE_SENSITIVE", "1")))

UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", "/var/lib/paperwork-admin/uploads")
