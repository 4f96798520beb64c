from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List

import mysql.connector

from ..core.constants import MISSING_TIME_MARKER
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
        finally:
            cur.close()
    except mysql.connector.Error:
        logger.exception("MySQL query failed")
        raise
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def mysql_time_to_clock(value: Any) -> str:
    """Render a MySQL TIME column as the "HH:MM:SS" string the engine expects.

    mysql-connector can return TIME as:
    - datetime.time
    - datetime.timedelta
    - string (e.g. '08:30:00', 'N/A')
    NULL becomes the "N/A" sentinel.
    """

    if value is None:
        return MISSING_TIME_MARKER

    if isinstance(value, time):
        return value.strftime("%H:%M:%S")

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        hours = total_seconds // 3600
        minutes = (total_seconds % 3600) // 60
        seconds = total_seconds % 60
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"

    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8").strip()

    if isinstance(value, str):
        return value.strip()

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
