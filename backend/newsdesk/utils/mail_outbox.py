import json
from datetime import datetime
from pathlib import Path

from flask import current_app


def outbox_path() -> Path:
	configured = current_app.config.get("MAIL_OUTBOX_PATH")
	if configured:
		return Path(configured)
	return Path(current_app.root_path).parent / "tmp" / "email_outbox.jsonl"


def send_email(to: str, subject: str, body: str, reply_to: str | None = None) -> dict:
	"""Outbox-backed email delivery.

	Messages are appended to a local JSONL outbox instead of a real mail
	server; an external mailer can drain the file.
	"""

	payload = {
		"to": (to or "").strip(),
		"subject": (subject or "").strip(),
		"body": body or "",
		"created_at": datetime.utcnow().replace(microsecond=0).isoformat() + "Z",
	}
	if reply_to:
		payload["reply_to"] = reply_to.strip()

	out_file = outbox_path()
	out_file.parent.mkdir(parents=True, exist_ok=True)
	with out_file.open("a", encoding="utf-8") as f:
		f.write(json.dumps(payload, ensure_ascii=False) + "\n")

	current_app.logger.info("[mail] queued to=%s subject=%s", payload["to"], payload["subject"])
	return payload
