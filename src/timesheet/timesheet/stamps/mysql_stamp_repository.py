from __future__ import annotations

import logging
import uuid
from datetime import date as date_type
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import format_iso_date, now_utc
from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, from_db_datetime, to_db_datetime
from .model import Stamp
from .repository import StampRepository

logger = logging.getLogger("timesheet.db")

_COLUMNS = "id, work_date, clock_in_at, clock_out_at, break_start_at, break_end_at, created_at, updated_at"


def _to_domain(r: dict) -> Stamp:
    work_date = r["work_date"]
    return Stamp(
        id=str(r["id"]),
        date=format_iso_date(work_date) if isinstance(work_date, date_type) else str(work_date),
        clock_in_at=from_db_datetime(r["clock_in_at"]),
        clock_out_at=from_db_datetime(r.get("clock_out_at")),
        break_start_at=from_db_datetime(r.get("break_start_at")),
        break_end_at=from_db_datetime(r.get("break_end_at")),
        created_at=from_db_datetime(r["created_at"]),
        updated_at=from_db_datetime(r["updated_at"]),
    )


class MySQLStampRepository(StampRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_by_date(self, date: str) -> Optional[Stamp]:
        logger.debug("find_by_date date=%s", date)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM stamps WHERE work_date=%s", (date,))
            r = fetchone(cur)
            return _to_domain(r) if r else None

    def find_in_range(self, start: str, end: str) -> Sequence[Stamp]:
        logger.debug("find_in_range start=%s end=%s", start, end)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM stamps
                WHERE work_date BETWEEN %s AND %s
                ORDER BY work_date ASC
                """,
                (start, end),
            )
            return [_to_domain(r) for r in fetchall(cur)]

    def create(self, *, date: str, clock_in_at: datetime) -> Stamp:
        stamp_id = uuid.uuid4().hex
        ts = to_db_datetime(now_utc())
        logger.debug("create date=%s clock_in_at=%s", date, clock_in_at)
        # work_date is UNIQUE: a concurrent second clock-in fails here instead of overwriting.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO stamps(id, work_date, clock_in_at, created_at, updated_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (stamp_id, date, to_db_datetime(clock_in_at), ts, ts),
            )
        return self._get(stamp_id)

    def set_clock_out(self, stamp_id: str, clock_out_at: datetime) -> Stamp:
        return self._update(stamp_id, "clock_out_at=%s", (to_db_datetime(clock_out_at),))

    def set_break_start(self, stamp_id: str, break_start_at: datetime) -> Stamp:
        # Starting a new break clears the previous break's end.
        return self._update(stamp_id, "break_start_at=%s, break_end_at=NULL", (to_db_datetime(break_start_at),))

    def set_break_end(self, stamp_id: str, break_end_at: datetime) -> Stamp:
        return self._update(stamp_id, "break_end_at=%s", (to_db_datetime(break_end_at),))

    def _update(self, stamp_id: str, assignments: str, params: tuple) -> Stamp:
        logger.debug("update id=%s set %s", stamp_id, assignments)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE stamps SET {assignments}, updated_at=%s WHERE id=%s",
                (*params, to_db_datetime(now_utc()), stamp_id),
            )
            if cur.rowcount == 0:
                raise StorageError(f"stamp {stamp_id} not found")
        return self._get(stamp_id)

    def _get(self, stamp_id: str) -> Stamp:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM stamps WHERE id=%s", (stamp_id,))
            r = fetchone(cur)
            if not r:
                raise StorageError(f"stamp {stamp_id} not found")
            return _to_domain(r)
