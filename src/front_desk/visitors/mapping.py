"""Single mapping between storage columns (snake_case) and wire fields (camelCase)."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .model import Visitor

# (storage column == Visitor attribute, wire field)
FIELD_MAP: tuple[tuple[str, str], ...] = (
    ("id", "id"),
    ("name", "name"),
    ("surname", "surname"),
    ("company", "company"),
    ("visitor_phone_number", "visitorPhoneNumber"),
    ("photo", "photo"),
    ("reason_for_visit", "reasonForVisit"),
    ("host", "host"),
    ("date", "date"),
    ("expected_time_in", "expectedTimeIn"),
    ("time_in", "timeIn"),
    ("agreement_signed", "agreementSigned"),
    ("time_out", "timeOut"),
)

COLUMN_TO_WIRE: Dict[str, str] = dict(FIELD_MAP)
WIRE_TO_COLUMN: Dict[str, str] = {wire: column for column, wire in FIELD_MAP}

COLUMNS: tuple[str, ...] = tuple(column for column, _ in FIELD_MAP)


def to_wire(visitor: Visitor) -> Dict[str, Any]:
    payload = {wire: getattr(visitor, column) for column, wire in FIELD_MAP}
    payload["status"] = visitor.status.value
    return payload


def from_wire(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Translate a wire payload into storage column names, dropping unknown fields."""
    return {WIRE_TO_COLUMN[k]: v for k, v in payload.items() if k in WIRE_TO_COLUMN}


def row_to_visitor(row: Mapping[str, Any]) -> Visitor:
    return Visitor(
        id=int(row["id"]),
        name=row["name"],
        surname=row["surname"],
        company=row.get("company"),
        visitor_phone_number=row.get("visitor_phone_number"),
        photo=row.get("photo"),
        reason_for_visit=row.get("reason_for_visit"),
        host=row.get("host"),
        date=row.get("date"),
        expected_time_in=row.get("expected_time_in"),
        time_in=row.get("time_in"),
        agreement_signed=bool(row.get("agreement_signed")),
        time_out=row.get("time_out"),
    )
