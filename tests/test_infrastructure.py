from datetime import datetime, timezone

from src.timesheet.timesheet.common.datetime_utils import business_date, get_timezone, to_utc
from src.timesheet.timesheet.common.http import camel_case, http_status_for, to_json
from src.timesheet.timesheet.core.enums import WorkStatus
from src.timesheet.timesheet.core.errors import AttendanceNotFound, StampNotFound, StillOnBreak, StorageFailure
from src.timesheet.timesheet.database.bootstrap import split_sql
from src.timesheet.timesheet.database.mysql_base import from_db_datetime, to_db_datetime
from src.timesheet.timesheet.stamps.model import StatusSnapshot


def test_split_sql_respects_quotes_and_comments():
    sql = """
    -- stamps table
    CREATE TABLE a (x VARCHAR(5) DEFAULT ';');
    INSERT INTO a VALUES ('it''s; fine');
    SELECT 1
    """

    statements = list(split_sql(sql))

    assert len(statements) == 3
    assert statements[0].startswith("CREATE TABLE a")
    assert statements[2] == "SELECT 1"


def test_db_datetimes_round_trip_as_utc():
    aware = datetime(2026, 2, 2, 9, 0, tzinfo=get_timezone("Asia/Tokyo"))

    stored = to_db_datetime(aware)

    assert stored == datetime(2026, 2, 2, 0, 0)
    assert from_db_datetime(stored) == aware
    assert to_db_datetime(None) is None


def test_business_date_in_display_timezone():
    now = datetime(2026, 2, 1, 15, 30, tzinfo=timezone.utc)

    assert business_date(now, get_timezone("Asia/Tokyo")) == "2026-02-02"
    assert business_date(now, timezone.utc) == "2026-02-01"
    assert to_utc(datetime(2026, 2, 1, 15, 30)) == now


def test_to_json_uses_camel_case_and_enum_values():
    snapshot = StatusSnapshot(status=WorkStatus.ON_BREAK, stamp=None)

    assert camel_case("total_late_night_minutes") == "totalLateNightMinutes"
    assert to_json(snapshot) == {"status": "on_break", "stamp": None}


def test_http_status_mapping():
    assert http_status_for(StampNotFound("2026-02-02")) == 400
    assert http_status_for(StillOnBreak("2026-02-02")) == 400
    assert http_status_for(AttendanceNotFound("2026-02-02")) == 404
    assert http_status_for(StorageFailure(RuntimeError("down"))) == 500
    assert StampNotFound("2026-02-02").message == "No stamp record for 2026-02-02"
