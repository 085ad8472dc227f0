"""Database bootstrap helpers.

``connect_db`` is called once when the process starts.  A failure is
logged and swallowed so the process keeps serving; requests that need the
database will fail on their own until it becomes reachable.
"""

from __future__ import annotations

import time
from typing import Optional

import structlog
from django.core.management import call_command
from django.db import DatabaseError, connections

logger = structlog.get_logger(__name__)

CONNECTION_ERROR_MESSAGE = "Hubo un error al conectar la base de datos"


def connect_db(alias: str = "default", sync: bool = False) -> bool:
    """Open the connection for ``alias`` and optionally apply migrations.

    Returns ``True`` when the database answered (and the schema was synced
    if requested), ``False`` otherwise.
    """
    try:
        connections[alias].ensure_connection()
    except DatabaseError as exc:
        logger.error(
            "database_connection_failed",
            database=alias,
            detail=CONNECTION_ERROR_MESSAGE,
            error=str(exc),
        )
        return False

    logger.info("database_connected", database=alias)
    if sync:
        try:
            call_command("migrate", database=alias, interactive=False, verbosity=0)
        except DatabaseError as exc:
            logger.error(
                "database_connection_failed",
                database=alias,
                stage="migrate",
                detail=CONNECTION_ERROR_MESSAGE,
                error=str(exc),
            )
            return False
        logger.info("database_synced", database=alias)
    return True


def check_database(alias: str = "default") -> Optional[float]:
    """Run ``SELECT 1`` and return the round-trip time in ms, or ``None`` if down."""
    start = time.monotonic()
    try:
        conn = connections[alias]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError:
        logger.error("health_check_db_failure", database=alias)
        return None
    return round((time.monotonic() - start) * 1000, 2)
