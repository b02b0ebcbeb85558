from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.enums import StatusFilter
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

FORM_FIELDS = ("name", "surname", "company", "visitorPhoneNumber", "photo", "reasonForVisit", "host")


def form_payload(form) -> dict:
    """Kiosk form fields use the wire names; the checkbox arrives as 'on'."""
    payload = {k: form.get(k, "") for k in FORM_FIELDS}
    payload["agreementSigned"] = form.get("agreementSigned") in ("on", "true", "1")
    return payload


def register(app: Flask, container: Container) -> None:
    service = container.visitor_service

    @app.route("/", methods=["GET", "POST"], endpoint="kiosk_sign_in")
    def kiosk_sign_in():
        form = {}
        if request.method == "POST":
            form = form_payload(request.form)
            try:
                visitor = service.create(form)
                return render_template("kiosk/success.html", visitor=visitor)
            except ValidationError as e:
                flash(str(e), "warning")
            except Exception:
                logger.exception("Error signing in visitor")
                flash("Something went wrong while signing you in. Please contact reception.", "danger")

        return render_template("kiosk/sign_in.html", form=form)

    @app.route("/signout", methods=["GET"], endpoint="kiosk_sign_out")
    def kiosk_sign_out():
        name = request.args.get("name", "")
        found = []
        if "name" in request.args:
            try:
                found = service.search(name, StatusFilter.CHECKED_IN.value)
                if not found:
                    flash("No matching signed-in visitors found.", "info")
            except ValidationError:
                flash("Please enter a name to search.", "warning")
            except Exception:
                logger.exception("Error searching visitors")
                flash("Failed to search for visitors. Please try again.", "danger")

        return render_template("kiosk/sign_out.html", name=name, found=found)

    @app.route("/signout/<int:visitor_id>", methods=["POST"], endpoint="kiosk_sign_out_submit")
    def kiosk_sign_out_submit(visitor_id: int):
        try:
            service.sign_out(visitor_id)
            flash("You have been successfully signed out. Thank you for your visit!", "success")
        except (ValidationError, NotFoundError) as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("Error signing out visitor %s", visitor_id)
            flash("Sign-out failed. Please contact reception.", "danger")
        return redirect(url_for("kiosk_sign_out"))
