"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the state machine and calculations live in services.
"""

import importlib
from datetime import date, timedelta

from config import get_settings_module

from src.timesheet.timesheet.container import build_container
from src.timesheet.timesheet.core.result import Err


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, timezone=settings.TIMEZONE)

    status = container.stamp_service.get_status()
    print(status)

    today = date.today()
    week_start = today - timedelta(days=today.weekday())
    result = container.attendance_service.get_by_date_range(week_start.isoformat(), today.isoformat())
    if isinstance(result, Err):
        print("error:", result.error.message)
    else:
        print(result.value.summary)


if __name__ == "__main__":
    main()
