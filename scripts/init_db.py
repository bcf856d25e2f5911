from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.container import build_container
from src.attendance_tracker.attendance_tracker.database.bootstrap import ensure_database_exists, list_tables
from src.attendance_tracker.attendance_tracker.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    config = DBConfig.from_dict(db_config)

    ensure_database_exists(config)
    container = build_container(db_config=db_config)
    container.attendance_service.ensure_schema()

    tables = list_tables(container.conn)
    print(f"OK: attendance table ready -> {config.describe()} (tables={', '.join(tables)})")


if __name__ == "__main__":
    main()
