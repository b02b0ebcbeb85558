from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .mapping import COLUMNS, row_to_visitor
from .model import NewVisitor, Visitor
from .repository import VisitorRepository

_SELECT = "SELECT " + ", ".join(COLUMNS) + " FROM visitors"
_WRITABLE = frozenset(c for c in COLUMNS if c != "id")


def _like_pattern(term: str) -> str:
    escaped = term.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class MySQLVisitorRepository(VisitorRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Visitor]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY id DESC")
            return [row_to_visitor(r) for r in fetchall(cur)]

    def get_by_id(self, visitor_id: int) -> Optional[Visitor]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (int(visitor_id),))
            r = fetchone(cur)
            return row_to_visitor(r) if r else None

    def search_by_name(self, term: str) -> Sequence[Visitor]:
        pattern = _like_pattern(term)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                {_SELECT}
                WHERE LOWER(name) LIKE %s
                   OR LOWER(surname) LIKE %s
                   OR LOWER(CONCAT(name, ' ', surname)) LIKE %s
                ORDER BY id DESC
                """,
                (pattern, pattern, pattern),
            )
            return [row_to_visitor(r) for r in fetchall(cur)]

    def create(self, visitor: NewVisitor) -> Visitor:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO visitors(
                    name, surname, company, visitor_phone_number, photo, reason_for_visit,
                    host, date, expected_time_in, time_in, agreement_signed
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    visitor.name,
                    visitor.surname,
                    visitor.company,
                    visitor.visitor_phone_number,
                    visitor.photo,
                    visitor.reason_for_visit,
                    visitor.host,
                    visitor.date,
                    visitor.expected_time_in,
                    visitor.time_in,
                    int(bool(visitor.agreement_signed)),
                ),
            )
            new_id = int(cur.lastrowid)
            cur.execute(f"{_SELECT} WHERE id=%s", (new_id,))
            return row_to_visitor(fetchone(cur))

    def update_fields(self, visitor_id: int, fields: Mapping[str, object]) -> Optional[Visitor]:
        unknown = set(fields) - _WRITABLE
        if unknown:
            raise ValueError(f"Unknown visitor columns: {sorted(unknown)}")

        with db_cursor(self._conn_factory) as (_, cur):
            # rowcount is 0 for no-op updates in MySQL, so check existence explicitly.
            cur.execute("SELECT id FROM visitors WHERE id=%s", (int(visitor_id),))
            if not fetchone(cur):
                return None

            if fields:
                assignments = ", ".join(f"{column}=%s" for column in fields)
                params = [int(v) if isinstance(v, bool) else v for v in fields.values()]
                cur.execute(
                    f"UPDATE visitors SET {assignments} WHERE id=%s",
                    (*params, int(visitor_id)),
                )

            cur.execute(f"{_SELECT} WHERE id=%s", (int(visitor_id),))
            return row_to_visitor(fetchone(cur))

    def delete(self, visitor_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM visitors WHERE id=%s", (int(visitor_id),))
            return cur.rowcount > 0

    def sign_out_all_open(self, *, time_out: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE visitors
                SET time_out=%s
                WHERE time_in IS NOT NULL AND time_in <> ''
                  AND (time_out IS NULL OR time_out = '')
                """,
                (time_out,),
            )
            return int(cur.rowcount)
