from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import VisitStatus


@dataclass(frozen=True)
class Visitor:
    """Domain entity: one visit at the front desk."""

    id: int
    name: str
    surname: str
    company: Optional[str] = None
    visitor_phone_number: Optional[str] = None
    photo: Optional[str] = None
    reason_for_visit: Optional[str] = None
    host: Optional[str] = None
    date: Optional[str] = None
    expected_time_in: Optional[str] = None
    time_in: Optional[str] = None
    agreement_signed: bool = False
    time_out: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}".strip()

    @property
    def status(self) -> VisitStatus:
        if not self.time_in:
            return VisitStatus.SCHEDULED
        if not self.time_out:
            return VisitStatus.CHECKED_IN
        return VisitStatus.CHECKED_OUT


@dataclass(frozen=True)
class NewVisitor:
    """Validated input for inserting a visitor row (no id yet)."""

    name: str
    surname: str
    company: Optional[str] = None
    visitor_phone_number: Optional[str] = None
    photo: Optional[str] = None
    reason_for_visit: Optional[str] = None
    host: Optional[str] = None
    date: Optional[str] = None
    expected_time_in: Optional[str] = None
    time_in: Optional[str] = None
    agreement_signed: bool = False
