from flask import Blueprint, request
from flask_jwt_extended import jwt_required

from newsdesk.schemas.user_schemas import UserAdminUpdateSchema
from newsdesk.services import user_service
from newsdesk.utils.responses import success_response
from newsdesk.utils.security import require_roles

bp = Blueprint("user_routes", __name__)

user_update_schema = UserAdminUpdateSchema()


@bp.get("")
@jwt_required()
def list_users():
    require_roles("ADMIN")
    data = user_service.list_users(
        search=request.args.get("search"),
        role=request.args.get("role"),
        status=request.args.get("status"),
        page=request.args.get("page", 1),
        limit=request.args.get("limit", 20),
    )
    return success_response(data=data)


@bp.put("/<int:user_id>")
@jwt_required()
def update_user(user_id: int):
    require_roles("ADMIN")
    data = user_update_schema.load(request.json or {})
    user = user_service.update_user(user_id, data)
    return success_response(data={"user": user}, message="User updated successfully")


@bp.delete("/<int:user_id>")
@jwt_required()
def delete_user(user_id: int):
    require_roles("ADMIN")
    user_service.delete_user(user_id)
    return success_response(message="User deleted successfully")
