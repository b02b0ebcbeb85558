from __future__ import annotations

from front_desk.dashboard.controller import SESSION_FLAG

WALK_IN = {"name": "Ann", "surname": "Lee", "company": "Acme", "host": "Bob", "agreementSigned": True}


def test_admin_requires_login(client):
    res = client.get("/admin")

    assert res.status_code == 302
    assert "/login" in res.headers["Location"]


def test_login_with_wrong_passcode(client):
    res = client.post("/login", data={"passcode": "nope"})

    assert res.status_code == 200
    assert b"Incorrect passcode" in res.data
    with client.session_transaction() as sess:
        assert SESSION_FLAG not in sess


def test_login_and_logout(client):
    res = client.post("/login", data={"passcode": "test-passcode"})
    assert res.status_code == 302
    assert client.get("/admin").status_code == 200

    client.get("/logout")
    assert client.get("/admin").status_code == 302


def test_dashboard_lists_scheduled_and_walk_in_visitors(admin_client, visitor_service):
    visitor_service.create(WALK_IN)
    visitor_service.schedule({"name": "Cara", "surname": "Diaz", "expectedTimeIn": "10:00"})

    res = admin_client.get("/admin")

    assert res.status_code == 200
    assert b"Ann Lee" in res.data
    assert b"Cara Diaz" in res.data
    assert b"Log Arrival" in res.data


def test_dashboard_bad_filter_falls_back(admin_client):
    res = admin_client.get("/admin?status=bogus")

    assert res.status_code == 200
    assert b"status must be one of" in res.data


def test_dashboard_api(admin_client, visitor_service):
    today = "2026-02-02"
    visitor_service.create({**WALK_IN, "timeIn": "09:10:00"})
    left = visitor_service.create({**WALK_IN, "name": "Ben", "company": "Globex", "timeIn": "14:00"})
    visitor_service.create({**WALK_IN, "name": "Old", "date": "2026-01-20", "timeIn": "08:00"})
    visitor_service.sign_out(left.id)

    body = admin_client.get("/api/dashboard", query_string={"q": "acme", "status": "checked-in", "range": "today"}).get_json()

    assert body["summary"] == {"total": 3, "today": 2, "checkedIn": 2}
    assert [v["name"] for v in body["visitors"]] == ["Ann"]
    assert body["daily"] == [{"date": today, "count": 1}]
    assert body["hourly"][9] == 1


def test_dashboard_api_rejects_unknown_range(admin_client):
    assert admin_client.get("/api/dashboard?range=forever").status_code == 400


def test_export_csv_uses_filters(admin_client, visitor_service):
    visitor_service.create({**WALK_IN, "date": "2026-02-02", "timeIn": "09:00:00"})
    visitor_service.create({**WALK_IN, "name": "Ben", "company": "Globex", "date": "2026-02-02", "timeIn": "10:00:00"})

    res = admin_client.get("/admin/export.csv?q=globex")

    lines = res.data.decode("utf-8-sig").strip().splitlines()
    assert res.mimetype == "text/csv"
    assert "attachment; filename=visitor_log_" in res.headers["Content-Disposition"]
    assert lines[0] == "Name,Surname,Company,Host,Date,Time In,Time Out"
    assert lines[1:] == ["Ben,Lee,Globex,Bob,2026-02-02,10:00:00,N/A"]


def test_schedule_form(admin_client, visitors_repo):
    res = admin_client.post(
        "/admin/schedule",
        data={"name": "Cara", "surname": "Diaz", "host": "Bob", "date": "", "expectedTimeIn": "10:00", "status": "scheduled"},
    )

    assert res.status_code == 302
    assert "status=scheduled" in res.headers["Location"]
    (visitor,) = visitors_repo.list_all()
    assert visitor.time_in is None
    assert visitor.date == "2026-02-02"


def test_admin_actions(admin_client, visitor_service, visitors_repo):
    scheduled = visitor_service.schedule({"name": "Cara", "surname": "Diaz", "expectedTimeIn": "10:00"})

    admin_client.post(f"/admin/visitors/{scheduled.id}/arrival")
    assert visitors_repo.get_by_id(scheduled.id).time_in == "09:30:00"

    admin_client.post(f"/admin/visitors/{scheduled.id}/edit", data={"name": "Carla", "surname": "Diaz", "company": "", "host": "Eve"})
    assert visitors_repo.get_by_id(scheduled.id).name == "Carla"

    admin_client.post(f"/admin/visitors/{scheduled.id}/signout")
    assert visitors_repo.get_by_id(scheduled.id).time_out == "09:30:00"

    admin_client.post(f"/admin/visitors/{scheduled.id}/delete")
    assert visitors_repo.get_by_id(scheduled.id) is None

    res = admin_client.post(f"/admin/visitors/{scheduled.id}/delete", follow_redirects=True)
    assert b"Visitor not found." in res.data


def test_dashboard_today_follows_service_clock(admin_client, visitor_service):
    visitor_service.create({**WALK_IN, "date": "2026-01-27", "timeIn": "09:00:00"})
    visitor_service.create({**WALK_IN, "name": "Ben", "date": "2026-01-26", "timeIn": "09:00:00"})

    body = admin_client.get("/api/dashboard?range=7days").get_json()
    res = admin_client.get("/admin/export.csv")

    assert [v["name"] for v in body["visitors"]] == ["Ann"]
    assert body["summary"]["today"] == 0
    assert "filename=visitor_log_2026-02-02.csv" in res.headers["Content-Disposition"]
