import os


def get_settings_module() -> str:
    # Environment comes from APP_ENV, 'development' by default.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "paperwork_admin.settings.production"

    if env in {"test", "testing"}:
        return "paperwork_admin.settings.testing"

    return "paperwork_admin.settings.development"
