from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Callable, Mapping, Optional, Sequence

from ..common.datetime_utils import format_date, format_time, now_local
from ..common.validators import optional_text, parse_choice, require_non_empty, require_true
from ..core.enums import StatusFilter
from ..core.exceptions import NotFoundError, ValidationError
from .mapping import from_wire
from .model import NewVisitor, Visitor
from .repository import VisitorRepository

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "surname", "company", "host")


class VisitorService:
    """Use cases for the visitor lifecycle: scheduled -> checked-in -> checked-out."""

    def __init__(self, visitors: VisitorRepository, *, clock: Callable[[], datetime] = now_local):
        self._visitors = visitors
        self._clock = clock

    def today(self) -> date:
        """Local date according to the service clock."""
        return self._clock().date()

    def list(self) -> Sequence[Visitor]:
        return self._visitors.list_all()

    def get(self, visitor_id: int) -> Visitor:
        visitor = self._visitors.get_by_id(visitor_id)
        if not visitor:
            raise NotFoundError("Visitor not found.")
        return visitor

    def search(self, name: Optional[str], status: Optional[str] = None) -> Sequence[Visitor]:
        term = require_non_empty(name, "name")
        status_filter = parse_choice(status, StatusFilter, "status", StatusFilter.ALL)
        return [v for v in self._visitors.search_by_name(term) if status_filter.matches(v.status)]

    def create(self, payload: Mapping[str, Any]) -> Visitor:
        """Walk-in sign-in from the kiosk form."""

        fields = from_wire(payload)
        require_true(fields.get("agreement_signed"), "You must sign the agreement to proceed.")

        now = self._clock()
        new = NewVisitor(
            name=require_non_empty(fields.get("name"), "name"),
            surname=require_non_empty(fields.get("surname"), "surname"),
            company=optional_text(fields.get("company"), "company"),
            visitor_phone_number=optional_text(fields.get("visitor_phone_number"), "visitorPhoneNumber"),
            photo=optional_text(fields.get("photo"), "photo"),
            reason_for_visit=optional_text(fields.get("reason_for_visit"), "reasonForVisit"),
            host=optional_text(fields.get("host"), "host"),
            date=optional_text(fields.get("date"), "date") or format_date(now),
            time_in=optional_text(fields.get("time_in"), "timeIn") or format_time(now),
            agreement_signed=True,
        )
        visitor = self._visitors.create(new)
        logger.info("Visitor %s signed in (%s)", visitor.id, visitor.full_name)
        return visitor

    def schedule(self, payload: Mapping[str, Any]) -> Visitor:
        """Pre-register a visitor; no time-in until arrival is logged."""

        fields = from_wire(payload)
        new = NewVisitor(
            name=require_non_empty(fields.get("name"), "name"),
            surname=require_non_empty(fields.get("surname"), "surname"),
            company=optional_text(fields.get("company"), "company"),
            visitor_phone_number=optional_text(fields.get("visitor_phone_number"), "visitorPhoneNumber"),
            reason_for_visit=optional_text(fields.get("reason_for_visit"), "reasonForVisit"),
            host=optional_text(fields.get("host"), "host"),
            date=optional_text(fields.get("date"), "date") or format_date(self._clock()),
            expected_time_in=require_non_empty(fields.get("expected_time_in"), "expectedTimeIn"),
            time_in=None,
            agreement_signed=False,
        )
        visitor = self._visitors.create(new)
        logger.info("Visitor %s scheduled for %s %s", visitor.id, visitor.date, visitor.expected_time_in)
        return visitor

    def log_arrival(self, visitor_id: int, *, time_in: Optional[str] = None, date: Optional[str] = None) -> Visitor:
        now = self._clock()
        visitor = self._visitors.update_fields(
            visitor_id,
            {
                "time_in": optional_text(time_in, "timeIn") or format_time(now),
                "date": optional_text(date, "date") or format_date(now),
                "agreement_signed": True,
            },
        )
        if not visitor:
            raise NotFoundError("Visitor not found.")
        logger.info("Visitor %s arrived at %s", visitor.id, visitor.time_in)
        return visitor

    def sign_out(self, visitor_id: int, *, time_out: Optional[str] = None) -> Visitor:
        current = self.get(visitor_id)
        if not current.time_in:
            raise ValidationError("Visitor has not arrived yet.")

        visitor = self._visitors.update_fields(
            visitor_id,
            {"time_out": optional_text(time_out, "timeOut") or format_time(self._clock())},
        )
        if not visitor:
            # Deleted between the read and the write.
            raise NotFoundError("Visitor not found.")
        logger.info("Visitor %s signed out at %s", visitor.id, visitor.time_out)
        return visitor

    def update(self, visitor_id: int, payload: Mapping[str, Any]) -> Visitor:
        fields = {k: v for k, v in from_wire(payload).items() if k in EDITABLE_FIELDS}

        changes: dict[str, Optional[str]] = {}
        for column, value in fields.items():
            if column in ("name", "surname"):
                changes[column] = require_non_empty(value, column)
            else:
                changes[column] = optional_text(value, column)

        visitor = self._visitors.update_fields(visitor_id, changes)
        if not visitor:
            raise NotFoundError("Visitor not found.")
        return visitor

    def delete(self, visitor_id: int) -> None:
        if not self._visitors.delete(visitor_id):
            raise NotFoundError("Visitor not found.")
        logger.info("Visitor %s deleted", visitor_id)
