from flask import current_app

from newsdesk.utils.errors import ApiError
from newsdesk.utils.mail_outbox import send_email


def forwarding_enabled() -> bool:
	return bool(current_app.config.get("CONTACT_FORWARDING_ENABLED"))


def ensure_enabled() -> None:
	if not forwarding_enabled():
		raise ApiError("Contact forwarding is disabled", 404)


def forward_contact_message(data: dict) -> dict:
	"""Hand a Contact page message to the newsroom mailbox."""

	ensure_enabled()

	name = data["name"].strip()
	email = data["email"].strip().lower()
	subject = data["subject"].strip()
	message = data["message"].strip()
	if not (name and subject and message):
		raise ApiError("Validation failed", 400, errors={"_schema": ["All fields are required."]})

	recipient = current_app.config.get("CONTACT_RECIPIENT") or "editor@coimbatoreexpress.com"
	send_email(
		to=recipient,
		subject=f"[Contact] {subject}",
		body=f"From: {name} <{email}>\n\n{message}",
		reply_to=email,
	)
	current_app.logger.info("[contact] forwarded message from=%s", email)
	return {"recipient": recipient}
