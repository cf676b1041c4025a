from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Sequence

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
        finally:
            cur.close()
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def fetch_paginated(
    conn_factory: DatabaseConnection,
    sql: str,
    params: Sequence[Any] = (),
    *,
    page_size: int,
) -> Iterator[Dict[str, Any]]:
    """Run ``sql`` page by page (``LIMIT/OFFSET``) until a short page.

    ``sql`` must carry a deterministic ORDER BY and no LIMIT of its own.
    """

    if page_size <= 0:
        raise ValueError(f"page_size must be positive: {page_size!r}")

    offset = 0
    with db_cursor(conn_factory) as (_, cur):
        while True:
            cur.execute(f"{sql} LIMIT %s OFFSET %s", (*params, int(page_size), int(offset)))
            rows = fetchall(cur)
            yield from rows
            if len(rows) < page_size:
                break
            offset += page_size
