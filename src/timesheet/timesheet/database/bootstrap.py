from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

import mysql.connector

logger = logging.getLogger("timesheet.db")


@dataclass(frozen=True)
class DBTarget:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_config(cls, db_config: dict) -> "DBTarget":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "timesheet_db")),
        )

    def connect(self, *, with_database: bool = True):
        kwargs = dict(host=self.host, port=self.port, user=self.user, password=self.password, use_pure=True)
        if with_database:
            kwargs["database"] = self.database
        return mysql.connector.connect(**kwargs)


_CREATE_DB_OR_USE = re.compile(r"(?im)^\s*(CREATE\s+DATABASE|USE)\b.*?;\s*$")


def split_sql(sql: str) -> Iterator[str]:
    """Split a script on ';' outside quoted strings. `--` comment lines are dropped."""
    lines = [ln for ln in sql.splitlines() if not ln.lstrip().startswith("--")]
    buf: list[str] = []
    quote: str | None = None
    escaped = False

    for ch in "\n".join(lines):
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue
        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    """Create the database if needed, then run schema.sql against it (idempotent DDL)."""
    target = DBTarget.from_config(db_config)

    conn = target.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()

    # The script's own CREATE DATABASE / USE lines are ignored so any DB name works.
    sql = _CREATE_DB_OR_USE.sub("", Path(schema_path).read_text(encoding="utf-8"))
    conn = target.connect()
    try:
        cur = conn.cursor()
        for stmt in split_sql(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("schema applied to %s", target.database)


def list_tables(db_config: dict) -> list[str]:
    conn = DBTarget.from_config(db_config).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
