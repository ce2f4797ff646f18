from flask import Blueprint, request
from flask_jwt_extended import jwt_required

from newsdesk.schemas.category_schemas import CategoryCreateSchema, CategoryUpdateSchema
from newsdesk.services import category_service
from newsdesk.utils.responses import success_response
from newsdesk.utils.security import require_roles

bp = Blueprint("category_routes", __name__)

category_create_schema = CategoryCreateSchema()
category_update_schema = CategoryUpdateSchema()


@bp.get("")
def list_categories():
    data = category_service.list_categories()
    return success_response(data={"categories": data})


@bp.get("/<int:category_id>")
def get_category(category_id: int):
    data = category_service.get_category(category_id)
    return success_response(data={"category": data})


@bp.get("/slug/<string:slug>")
def get_category_by_slug(slug: str):
    data = category_service.get_category_by_slug(
        slug,
        page=request.args.get("page", 1),
        limit=request.args.get("limit", 12),
    )
    return success_response(data=data)


@bp.post("")
@jwt_required()
def create_category():
    require_roles("EDITOR", "ADMIN")
    data = category_create_schema.load(request.json or {})
    category = category_service.create_category(data)
    return success_response(
        data={"category": category},
        message="Category created successfully",
        status_code=201,
    )


@bp.put("/<int:category_id>")
@jwt_required()
def update_category(category_id: int):
    require_roles("EDITOR", "ADMIN")
    data = category_update_schema.load(request.json or {})
    category = category_service.update_category(category_id, data)
    return success_response(data={"category": category}, message="Category updated successfully")


@bp.delete("/<int:category_id>")
@jwt_required()
def delete_category(category_id: int):
    require_roles("ADMIN")
    category_service.delete_category(category_id)
    return success_response(message="Category deleted successfully")
