from __future__ import annotations

import csv
import hmac
import io
import logging
from functools import wraps
from typing import Mapping

from flask import Flask, flash, jsonify, redirect, render_template, request, session, url_for

from ..common.datetime_utils import format_date
from ..common.validators import parse_choice
from ..container import Container
from ..core.enums import DateRange, StatusFilter
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..visitors.mapping import to_wire
from .state import DashboardState, build_view, load_visitors, set_date_range, set_search, set_status_filter

logger = logging.getLogger(__name__)

SESSION_FLAG = "is_admin_authenticated"
CSV_HEADERS = ["Name", "Surname", "Company", "Host", "Date", "Time In", "Time Out"]


def verify_passcode(given: str, expected: str) -> None:
    if not expected or not hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8")):
        raise AuthenticationError("Incorrect passcode")


def dashboard_state(visitors, args: Mapping[str, str]) -> DashboardState:
    """Build the dashboard state from a record set and the filter query args."""
    state = load_visitors(DashboardState(), visitors)
    state = set_search(state, args.get("q", ""))
    state = set_status_filter(state, parse_choice(args.get("status"), StatusFilter, "status", StatusFilter.ALL))
    return set_date_range(state, parse_choice(args.get("range"), DateRange, "range", DateRange.ALL))


def _filter_args(source: Mapping[str, str]) -> dict:
    return {k: source.get(k) for k in ("q", "status", "range") if source.get(k)}


def register(app: Flask, container: Container) -> None:
    service = container.visitor_service

    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not session.get(SESSION_FLAG):
                flash("Please log in to continue.", "warning")
                return redirect(url_for("admin_login"))
            return view(*args, **kwargs)

        return wrapper

    def _back():
        return redirect(url_for("admin_dashboard", **_filter_args(request.form)))

    @app.route("/login", methods=["GET", "POST"], endpoint="admin_login")
    def admin_login():
        if session.get(SESSION_FLAG):
            return redirect(url_for("admin_dashboard"))

        if request.method == "POST":
            try:
                verify_passcode(request.form.get("passcode", ""), str(app.config.get("ADMIN_PASSCODE") or ""))
                session[SESSION_FLAG] = True
                return redirect(url_for("admin_dashboard"))
            except AuthenticationError as e:
                flash(str(e), "danger")

        return render_template("admin/login.html")

    @app.route("/logout", methods=["GET", "POST"], endpoint="admin_logout")
    def admin_logout():
        session.pop(SESSION_FLAG, None)
        return redirect(url_for("admin_login"))

    @app.route("/admin", methods=["GET"], endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        today = service.today()
        try:
            visitors = service.list()
        except Exception:
            logger.exception("Error fetching visitors for dashboard")
            flash("Failed to load visitors. Please try again.", "danger")
            visitors = []

        try:
            state = dashboard_state(visitors, request.args)
        except ValidationError as e:
            flash(str(e), "warning")
            state = load_visitors(DashboardState(), visitors)

        return render_template(
            "admin/dashboard.html",
            state=state,
            view=build_view(state, today=today),
            status_options=list(StatusFilter),
            range_options=list(DateRange),
        )

    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    @admin_required
    def api_dashboard():
        try:
            state = dashboard_state(service.list(), request.args)
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except Exception:
            logger.exception("Error building dashboard")
            return jsonify({"message": "Failed to load dashboard."}), 500

        view = build_view(state, today=service.today())
        return jsonify(
            {
                "summary": {
                    "total": view.summary.total,
                    "today": view.summary.today,
                    "checkedIn": view.summary.checked_in,
                },
                "daily": [{"date": d, "count": c} for d, c in view.daily],
                "hourly": view.hourly,
                "visitors": [to_wire(v) for v in view.visible],
            }
        )

    @app.route("/admin/export.csv", methods=["GET"], endpoint="admin_export_csv")
    @admin_required
    def admin_export_csv():
        try:
            state = dashboard_state(service.list(), request.args)
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("admin_dashboard"))
        except Exception:
            logger.exception("Error exporting visitors")
            flash("Failed to export visitors.", "danger")
            return redirect(url_for("admin_dashboard"))

        today = service.today()
        out = io.StringIO()
        writer = csv.writer(out)
        writer.writerow(CSV_HEADERS)
        for v in build_view(state, today=today).visible:
            writer.writerow([v.name, v.surname, v.company or "", v.host or "", v.date or "", v.time_in or "", v.time_out or "N/A"])

        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=visitor_log_{format_date(today)}.csv"},
        )

    @app.route("/admin/schedule", methods=["POST"], endpoint="admin_schedule")
    @admin_required
    def admin_schedule():
        form = request.form.to_dict()
        try:
            visitor = service.schedule(form)
            flash(f"Scheduled {visitor.full_name}.", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("Error scheduling visitor")
            flash("Failed to schedule visitor.", "danger")
        return _back()

    @app.route("/admin/visitors/<int:visitor_id>/edit", methods=["POST"], endpoint="admin_visitor_edit")
    @admin_required
    def admin_visitor_edit(visitor_id: int):
        form = request.form.to_dict()
        try:
            service.update(visitor_id, form)
            flash("Visitor updated.", "success")
        except (ValidationError, NotFoundError) as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("Error updating visitor %s", visitor_id)
            flash("Failed to update visitor.", "danger")
        return _back()

    @app.route("/admin/visitors/<int:visitor_id>/arrival", methods=["POST"], endpoint="admin_visitor_arrival")
    @admin_required
    def admin_visitor_arrival(visitor_id: int):
        try:
            visitor = service.log_arrival(visitor_id)
            flash(f"Logged arrival for {visitor.full_name}.", "success")
        except (ValidationError, NotFoundError) as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("Error logging arrival for visitor %s", visitor_id)
            flash("Failed to log visitor arrival.", "danger")
        return _back()

    @app.route("/admin/visitors/<int:visitor_id>/signout", methods=["POST"], endpoint="admin_visitor_sign_out")
    @admin_required
    def admin_visitor_sign_out(visitor_id: int):
        try:
            visitor = service.sign_out(visitor_id)
            flash(f"Signed out {visitor.full_name}.", "success")
        except (ValidationError, NotFoundError) as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("Error signing out visitor %s", visitor_id)
            flash("Failed to sign out visitor.", "danger")
        return _back()

    @app.route("/admin/visitors/<int:visitor_id>/delete", methods=["POST"], endpoint="admin_visitor_delete")
    @admin_required
    def admin_visitor_delete(visitor_id: int):
        try:
            service.delete(visitor_id)
            flash("Visitor deleted.", "success")
        except NotFoundError as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("Error deleting visitor %s", visitor_id)
            flash("Failed to delete visitor.", "danger")
        return _back()
