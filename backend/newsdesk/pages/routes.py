from flask import Blueprint, current_app, render_template, url_for

from newsdesk.pages import content

bp = Blueprint("pages", __name__)


@bp.get("/about")
def about():
    half = (len(content.COVERAGE) + 1) // 2
    return render_template(
        "pages/about.html",
        site_name=content.SITE_NAME,
        intro=content.ABOUT_INTRO,
        pillars=content.ABOUT_PILLARS,
        coverage_columns=(content.COVERAGE[:half], content.COVERAGE[half:]),
        contact_email=content.CONTACT_EMAIL,
    )


@bp.get("/contact")
def contact():
    endpoint = None
    if current_app.config.get("CONTACT_FORWARDING_ENABLED"):
        endpoint = url_for("contact_routes.send_contact_message")

    return render_template(
        "pages/contact.html",
        site_name=content.SITE_NAME,
        fields=content.CONTACT_FIELDS,
        contact_email=content.CONTACT_EMAIL,
        contact_phone=content.CONTACT_PHONE,
        contact_phone_href=content.CONTACT_PHONE_HREF,
        contact_address=content.CONTACT_ADDRESS,
        ack_ms=int(current_app.config.get("CONTACT_ACK_MS") or 5000),
        endpoint=endpoint,
    )
