from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .common.datetime_utils import get_timezone
from .database.connection import DatabaseConnection
from .payroll.calculator.standard_calculator import StandardAttendanceCalculator
from .stamps.factory import StampTransitionFactory
from .stamps.mysql_stamp_repository import MySQLStampRepository
from .stamps.repository import StampRepository
from .stamps.service import StampService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    stamps_repo: StampRepository

    stamp_service: StampService
    attendance_service: AttendanceService


def build_services(stamps_repo: StampRepository, *, timezone: str | None = None, conn: DatabaseConnection | None = None) -> Container:
    """Wire services around any StampRepository (MySQL in the app, fakes in tests)."""
    tz = get_timezone(timezone)
    stamp_service = StampService(stamps_repo, timezone=tz, transitions=StampTransitionFactory())
    attendance_service = AttendanceService(stamps_repo, calculator=StandardAttendanceCalculator(tz))

    return Container(
        conn=conn,
        stamps_repo=stamps_repo,
        stamp_service=stamp_service,
        attendance_service=attendance_service,
    )


def build_container(*, db_config: dict, timezone: str | None = None) -> Container:
    conn = DatabaseConnection.from_dict(db_config)
    return build_services(MySQLStampRepository(conn), timezone=timezone, conn=conn)
