"""Example: using the service layer directly (without Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    for record in container.attendance_service.search("E1")[:5]:
        print(record.to_dict())
    print(container.report_service.summary().to_dict())


if __name__ == "__main__":
    main()
