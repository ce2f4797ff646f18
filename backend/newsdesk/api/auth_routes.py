from flask import Blueprint, request
from flask_jwt_extended import jwt_required

from newsdesk.schemas.auth_schemas import LoginSchema
from newsdesk.services import auth_service
from newsdesk.utils.responses import success_response
from newsdesk.utils.security import current_user_id, require_active_user

bp = Blueprint("auth", __name__)


@bp.post("/login")
def login():
    data = LoginSchema().load(request.json or {})
    result = auth_service.authenticate(data["email"], data["password"])
    return success_response(data=result, message="Login successful")


@bp.post("/refresh")
@jwt_required(refresh=True)
def refresh():
    result = auth_service.refresh_access_token(current_user_id())
    return success_response(data=result, message="Token refreshed")


@bp.get("/me")
@jwt_required()
def me():
    user = require_active_user(current_user_id())
    return success_response(
        data=auth_service.user_to_dict(user),
        message="Current user"
    )
