from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from .model import NewVisitor, Visitor


class VisitorRepository(Protocol):
    def list_all(self) -> Sequence[Visitor]:
        """All visitors, newest (highest id) first."""

        raise NotImplementedError

    def get_by_id(self, visitor_id: int) -> Optional[Visitor]:
        raise NotImplementedError

    def search_by_name(self, term: str) -> Sequence[Visitor]:
        """Case-insensitive substring match on name, surname or "name surname"."""

        raise NotImplementedError

    def create(self, visitor: NewVisitor) -> Visitor:
        raise NotImplementedError

    def update_fields(self, visitor_id: int, fields: Mapping[str, object]) -> Optional[Visitor]:
        """Set the given columns; returns the updated record or None when missing."""

        raise NotImplementedError

    def delete(self, visitor_id: int) -> bool:
        raise NotImplementedError

    def sign_out_all_open(self, *, time_out: str) -> int:
        """Close every checked-in visit; returns how many rows changed."""

        raise NotImplementedError
