from __future__ import annotations

from front_desk.visitors.mapping import COLUMNS, FIELD_MAP, from_wire, row_to_visitor, to_wire
from front_desk.visitors.model import Visitor


def test_wire_names_are_camel_case():
    visitor = Visitor(id=7, name="Ann", surname="Lee", visitor_phone_number="123", time_in="09:00")

    payload = to_wire(visitor)

    assert payload["visitorPhoneNumber"] == "123"
    assert payload["timeIn"] == "09:00"
    assert payload["timeOut"] is None
    assert payload["status"] == "checked-in"
    assert "visitor_phone_number" not in payload


def test_from_wire_drops_unknown_fields():
    assert from_wire({"reasonForVisit": "Audit", "isAdmin": True, "reason_for_visit": "x"}) == {
        "reason_for_visit": "Audit"
    }


def test_every_visitor_attribute_is_mapped():
    assert set(COLUMNS) == set(Visitor.__dataclass_fields__)
    assert len({wire for _, wire in FIELD_MAP}) == len(FIELD_MAP)


def test_row_to_visitor_coerces_tinyint_flag():
    row = {"id": 3, "name": "Ann", "surname": "Lee", "agreement_signed": 1, "time_in": None}

    visitor = row_to_visitor(row)

    assert visitor.agreement_signed is True
    assert visitor.company is None
