from __future__ import annotations

import importlib
import sys
from datetime import date, timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.container import build_container

DEMO_EMPLOYEES = [
    ("Asha Rao", "E1"),
    ("Bilal Khan", "E2"),
    ("Chen Wei", "E3"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    container.attendance_service.ensure_schema()

    today = date.today()
    created = 0
    for offset in range(3):
        work_date = (today - timedelta(days=offset)).strftime("%Y-%m-%d")
        for i, (name, employee_id) in enumerate(DEMO_EMPLOYEES):
            status = "Absent" if (i + offset) % 4 == 3 else "Present"
            container.attendance_service.create(
                {"employeeName": name, "employeeID": employee_id, "date": work_date, "status": status}
            )
            created += 1

    print(f"OK: seeded {created} attendance records")


if __name__ == "__main__":
    main()
