from flask import Blueprint, request
from flask_jwt_extended import jwt_required

from newsdesk.schemas.author_schemas import AuthorCreateSchema, AuthorUpdateSchema
from newsdesk.services import author_service
from newsdesk.utils.responses import success_response
from newsdesk.utils.security import require_roles

bp = Blueprint("author_routes", __name__)

author_create_schema = AuthorCreateSchema()
author_update_schema = AuthorUpdateSchema()


@bp.get("")
def list_authors():
    data = author_service.list_authors(
        search=request.args.get("search"),
        role=request.args.get("role"),
        status=request.args.get("status"),
        page=request.args.get("page", 1),
        limit=request.args.get("limit", 20),
    )
    return success_response(data=data)


@bp.get("/<int:author_id>")
def get_author(author_id: int):
    return success_response(data={"author": author_service.get_author(author_id)})


@bp.get("/<int:author_id>/stats")
def get_author_stats(author_id: int):
    return success_response(data={"stats": author_service.author_stats(author_id)})


@bp.post("")
@jwt_required()
def create_author():
    require_roles("EDITOR", "ADMIN")
    data = author_create_schema.load(request.json or {})
    author = author_service.create_author(data)
    return success_response(
        data={"author": author},
        message="Author created successfully",
        status_code=201,
    )


@bp.put("/<int:author_id>")
@jwt_required()
def update_author(author_id: int):
    require_roles("EDITOR", "ADMIN")
    data = author_update_schema.load(request.json or {})
    author = author_service.update_author(author_id, data)
    return success_response(data={"author": author}, message="Author updated successfully")


@bp.delete("/<int:author_id>")
@jwt_required()
def delete_author(author_id: int):
    require_roles("ADMIN")
    author_service.delete_author(author_id)
    return success_response(message="Author deleted successfully")
