from flask import Blueprint, request

from newsdesk.schemas.contact_schemas import ContactMessageSchema
from newsdesk.services import contact_service
from newsdesk.utils.responses import success_response

bp = Blueprint("contact_routes", __name__)

contact_message_schema = ContactMessageSchema()


@bp.post("")
def send_contact_message():
    contact_service.ensure_enabled()
    data = contact_message_schema.load(request.json or {})
    result = contact_service.forward_contact_message(data)
    return success_response(data=result, message="Message sent", status_code=202)
