from __future__ import annotations

import importlib

from paperwork_admin.container import build_container
from paperwork_admin.database.seed import seed_demo_data
from paperwork_admin.settings import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    container = build_container(storage_backend="mysql", db_config=db_config)
    written = seed_demo_data(container)

    print(
        f"OK: Seeded {written} demo records -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
